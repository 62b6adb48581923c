"""End-to-end tests for the Generator pipeline over mocked HTTP."""
from __future__ import annotations

import time

import httpx
import pytest

from darkcss.config import GeneratorConfig, Source
from darkcss.emit import BEGIN_MARKER, END_MARKER
from darkcss.errors import FetchError
from darkcss.fetch import HttpClient
from darkcss.pipeline import Generator


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


SITE = {
    "https://example.com/": (
        '<html><head><link rel="stylesheet" href="/main.css">'
        '<link rel="stylesheet" href="/extra.css"></head></html>'
    ),
    "https://example.com/main.css": ".a{color:#333}.b{border:1px solid #ddd}",
    "https://example.com/extra.css": ".c{color:#333!important}",
    "https://cdn.example.com/theme.css": ".a{color:#333}.d{border-top:1px solid #ddd}",
}

MAPPINGS = (
    ("$border: #ddd", "#111"),
    ("color: #333", "color: #bebebe"),
    ("color: #666", "color: #000"),
)

SOURCES = (
    Source("https://example.com/"),
    Source("https://cdn.example.com/theme.css", prefix="html.theme"),
)


def _config(**kwargs) -> GeneratorConfig:
    kwargs.setdefault("mappings", MAPPINGS)
    kwargs.setdefault("sources", SOURCES)
    kwargs.setdefault("ignore_selectors", ())
    kwargs.setdefault("unmergeable_selectors", ())
    return GeneratorConfig(**kwargs)


def _client(site: dict[str, str], delays: dict[str, float] | None = None) -> HttpClient:
    def handler(request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        time.sleep((delays or {}).get(url, 0))
        if url not in site:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=site[url])

    return HttpClient(transport=httpx.MockTransport(handler))


def _block(*lines: str) -> str:
    return "\n".join("  " + line for line in (BEGIN_MARKER, *lines, END_MARKER))


EXPECTED = _block(
    '/* auto-generated rule for "border: 1px solid #ddd" */',
    ".b {",
    "  border-color: #111;",
    "}",
    '/* auto-generated rule for "border-top: 1px solid #ddd" */',
    "html.theme .d {",
    "  border-top-color: #111;",
    "}",
    '/* auto-generated rule for "color: #333" */',
    ".a, html.theme .a {",
    "  color: #bebebe;",
    "}",
    '/* auto-generated rule for "color: #333 !important" */',
    ".c {",
    "  color: #bebebe !important;",
    "}",
)


# ---------------------------------------------------------------------------
# Full runs
# ---------------------------------------------------------------------------


class TestRun:
    def test_generates_block(self):
        assert Generator(_config(), client=_client(SITE)).run() == EXPECTED

    def test_idempotent(self):
        first = Generator(_config(), client=_client(SITE)).run()
        second = Generator(_config(), client=_client(SITE)).run()
        assert first == second

    def test_source_order_beats_completion_order(self):
        slow_first = _client(SITE, delays={"https://example.com/main.css": 0.2})
        assert Generator(_config(), client=slow_first).run() == EXPECTED

    def test_stylesheets_joined_in_link_order(self):
        css = Generator(_config(), client=_client(SITE)).fetch_css()
        assert css == [
            ".a{color:#333}.b{border:1px solid #ddd}\n.c{color:#333!important}",
            SITE["https://cdn.example.com/theme.css"],
        ]

    def test_page_headers_sent(self):
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.headers.get("user-agent", ""))
            return httpx.Response(200, text="<html></html>")

        config = _config(sources=(Source("https://m.example.com/", fetch_options={"headers": {"User-Agent": "Phone"}}),))
        Generator(config, client=HttpClient(transport=httpx.MockTransport(handler))).run()
        assert seen == ["Phone"]

    def test_sources_sharing_a_url(self):
        pages = {
            "Desktop": '<link rel="stylesheet" href="/desk.css">',
            "Phone": '<link rel="stylesheet" href="/mobile.css">',
        }
        styles = {
            "https://x.test/desk.css": ".desk{color:#333}",
            "https://x.test/mobile.css": ".mobile{color:#333}",
        }

        def handler(request: httpx.Request) -> httpx.Response:
            url = str(request.url)
            if url in styles:
                return httpx.Response(200, text=styles[url])
            return httpx.Response(200, text=pages[request.headers["user-agent"]])

        config = _config(
            mappings=(("color: #333", "color: #bebebe"),),
            sources=(
                Source("https://x.test/", fetch_options={"headers": {"User-Agent": "Desktop"}}),
                Source(
                    "https://x.test/",
                    prefix="html.m",
                    fetch_options={"headers": {"User-Agent": "Phone"}},
                ),
            ),
        )
        generator = Generator(config, client=HttpClient(transport=httpx.MockTransport(handler)))
        assert generator.fetch_css() == [".desk{color:#333}", ".mobile{color:#333}"]
        assert "  .desk, html.m .mobile {" in generator.run()


class TestFailure:
    def test_failed_stylesheet_aborts(self):
        site = dict(SITE)
        del site["https://example.com/extra.css"]
        with pytest.raises(FetchError) as excinfo:
            Generator(_config(), client=_client(site)).run()
        assert excinfo.value.url == "https://example.com/extra.css"

    def test_failed_page_aborts(self):
        site = dict(SITE)
        del site["https://example.com/"]
        with pytest.raises(FetchError):
            Generator(_config(), client=_client(site)).run()


# ---------------------------------------------------------------------------
# Offline generation
# ---------------------------------------------------------------------------


class TestGenerateFromCss:
    def _generate(self, css: str, rows, **source_kwargs) -> str:
        config = _config(mappings=tuple(rows), sources=(Source("local.css", **source_kwargs),))
        return Generator(config).generate_from_css([css])

    def test_shorthand_equivalence(self):
        out = self._generate(
            ".x{border:1px solid #ddd}.y{border:1px #ddd solid}",
            [("border: 1px solid #ddd", "border-color: #343434")],
        )
        assert "  .x, .y {" in out

    def test_important_isolation(self):
        out = self._generate(
            ".x{color:#333}.y{color:#333 !important}",
            [("color: #333", "color: #bebebe")],
        )
        assert out.count("/* auto-generated rule for") == 2
        assert "  .x {\n    color: #bebebe;\n  }" in out
        assert "  .y {\n    color: #bebebe !important;\n  }" in out

    def test_pseudo_key_expansion(self):
        out = self._generate(
            ".p{border-color:#ddd}.q{border-top:1px solid #ddd}.r{border-left:2px dashed #ddd}",
            [("$border: #ddd", "#111")],
        )
        assert "  .p {\n    border-color: #111;\n  }" in out
        assert "  .q {\n    border-top-color: #111;\n  }" in out
        assert "  .r {\n    border-left-color: #111;\n  }" in out
        assert "border-top: " not in out.replace('"border-top: 1px solid #ddd"', "")
        assert "solid #111" not in out and "dashed #111" not in out

    def test_prefix_match_exemption(self):
        out = self._generate(
            ".existing .child, .other .child { color: #333 }",
            [("color: #333", "color: #bebebe")],
            prefix="html.theme",
            match=(".existing",),
        )
        assert "  .existing .child, html.theme .other .child {" in out

    def test_ignore_and_unmergeable(self):
        config = GeneratorConfig(
            mappings=(("color: #333", "color: #bebebe"),),
            sources=(Source("local.css"),),
        )
        out = Generator(config).generate_from_css(
            [".pl-k, ::-webkit-input-placeholder, .keep { color: #333 }"]
        )
        assert "  .keep {" in out
        assert ".pl-k" not in out
        assert "webkit" not in out

    def test_nth_child_selector(self):
        out = self._generate(
            "tr:nth-child(2n+1) { color: #333 }",
            [("color: #333", "color: #bebebe")],
        )
        assert "  tr:nth-child(2n + 1) {" in out
        assert "/**/" not in out

    def test_dead_entry_omitted(self):
        out = self._generate(".x{color:#333}", [("color: #333", "color: #bebebe"), ("color: #666", "color: #000")])
        assert "#666" not in out

    def test_cross_source_dedup(self):
        config = _config(
            mappings=(("color: #333", "color: #bebebe"),),
            sources=(Source("one.css"), Source("two.css")),
        )
        out = Generator(config).generate_from_css([
            ".a{color:#333}",
            ".b{color:#333}.a{color:#333}",
        ])
        assert "  .a, .b {" in out

    def test_css_must_align_with_sources(self):
        config = _config(sources=(Source("one.css"), Source("two.css")))
        with pytest.raises(ValueError):
            Generator(config).generate_from_css([".a{color:#333}"])
