"""Generator: fetch sources, collect selectors, emit the rule block."""
from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future, ThreadPoolExecutor
from typing import TypeVar

from darkcss.collect.accumulator import SelectorAccumulator, SourceResult, merge_results
from darkcss.collect.matcher import DeclarationMatcher, collect_source
from darkcss.config import GeneratorConfig, Source
from darkcss.emit.emitter import RuleEmitter
from darkcss.emit.formatter import CssFormatter
from darkcss.fetch.discovery import resolve_stylesheet_urls
from darkcss.fetch.http import HttpClient
from darkcss.mapping.builder import expand_mappings

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _map_in_order(pool: ThreadPoolExecutor, fn: Callable[[T], R], items: Sequence[T]) -> list[R]:
    """Run ``fn`` over ``items`` concurrently; results follow ``items`` order.

    The first failure (in item order) is raised after pending work is
    cancelled.
    """
    futures: list[Future[R]] = [pool.submit(fn, item) for item in items]
    try:
        return [f.result() for f in futures]
    except BaseException:
        for f in futures:
            f.cancel()
        raise


class Generator:
    """Orchestrates one regeneration run.

    Phases: expand the mapping table; fetch HTML sources and discover
    their stylesheets; fetch every stylesheet; match and collect each
    source independently; fold the per-source results in source-list
    order; emit the block.
    """

    def __init__(self, config: GeneratorConfig, *, client: HttpClient | None = None) -> None:
        self.config = config
        self.table = expand_mappings(config.mappings)
        self.matcher = DeclarationMatcher(self.table, config.device, config.shorthands)
        self.emitter = RuleEmitter(
            self.table,
            CssFormatter(config.max_selector_length, config.indent_size),
        )
        self._client = client
        self._owns_client = client is None

    # -- fetching ------------------------------------------------------------

    def _stylesheet_urls(self, client: HttpClient, source: Source) -> list[str]:
        if source.is_stylesheet:
            return [source.url]
        page = client.get(source.url, headers=source.headers)
        urls = resolve_stylesheet_urls(page)
        logger.info("Found %d stylesheets on %s", len(urls), source.url)
        return urls

    def fetch_css(self) -> list[str]:
        """Fetch the combined CSS text of every source, in source-list order."""
        client = self._client or HttpClient(timeout=self.config.timeout)
        sources = list(self.config.sources)
        try:
            with ThreadPoolExecutor(max_workers=self.config.max_workers) as pool:
                logger.info("Discovering stylesheets for %d sources", len(sources))
                discovered = _map_in_order(
                    pool, lambda s: self._stylesheet_urls(client, s), sources
                )
                flat = [url for urls in discovered for url in urls]
                logger.info("Fetching %d stylesheets", len(flat))
                bodies = _map_in_order(pool, lambda u: client.get(u).text, flat)
        finally:
            if self._owns_client:
                client.close()

        css: list[str] = []
        pos = 0
        for urls in discovered:
            css.append("\n".join(bodies[pos:pos + len(urls)]))
            pos += len(urls)
        return css

    # -- matching ------------------------------------------------------------

    def collect(self, css: Sequence[str]) -> list[SourceResult]:
        """Per-source results, in source-list order.

        ``css`` holds one text per configured source, aligned with
        ``config.sources``; sources may share a URL.
        """
        if len(css) != len(self.config.sources):
            raise ValueError(
                f"Expected CSS for {len(self.config.sources)} sources, got {len(css)}"
            )
        return [
            collect_source(
                source,
                text,
                self.matcher,
                ignore=self.config.ignore_selectors,
                unmergeable=self.config.unmergeable_selectors,
            )
            for source, text in zip(self.config.sources, css)
        ]

    def accumulate(self, css: Sequence[str]) -> SelectorAccumulator:
        return merge_results(self.collect(css))

    def generate_from_css(self, css: Sequence[str]) -> str:
        """Emit the block for already fetched CSS, one text per source."""
        return self.emitter.emit(self.accumulate(css))

    def run(self) -> str:
        """Fetch everything and return the generated block."""
        return self.generate_from_css(self.fetch_css())
