"""Filter, tidy and prefix selectors before they are accumulated."""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

from darkcss.collect.accumulator import SelectorAccumulator
from darkcss.config import Source

__all__ = ["SelectorCollector", "normalize_combinators", "apply_prefix"]

_COMBINATOR_RE = re.compile(r"([+~>])")
_SPACES_RE = re.compile(r" {2,}")
_ROOT_HEAD = ":root "


def normalize_combinators(selector: str) -> str:
    """Pad ``+``, ``~`` and ``>`` with spaces and collapse runs of spaces."""
    return _SPACES_RE.sub(" ", _COMBINATOR_RE.sub(r" \1 ", selector))


def apply_prefix(selector: str, prefix: str | None, match: Sequence[str] = ()) -> str:
    """Scope ``selector`` under ``prefix``.

    Selectors whose first compound already contains one of ``match`` are
    returned unchanged. A leading ``:root`` is replaced rather than
    prefixed when the prefix targets ``html``; ``html :root`` never
    matches anything.
    """
    if not prefix:
        return selector
    head = (selector.split() or [""])[0]
    if any(m in head for m in match):
        return selector
    if selector.startswith(_ROOT_HEAD) and prefix.startswith("html"):
        return f"{prefix} {selector[len(_ROOT_HEAD):]}"
    return f"{prefix} {selector}"


@dataclass(frozen=True)
class SelectorCollector:
    """Applies a source's selector policy and feeds an accumulator."""

    ignore: Sequence[re.Pattern[str]] = ()
    unmergeable: Sequence[re.Pattern[str]] = ()
    prefix: str | None = None
    match: Sequence[str] = ()

    @classmethod
    def for_source(
        cls,
        source: Source,
        ignore: Sequence[re.Pattern[str]] = (),
        unmergeable: Sequence[re.Pattern[str]] = (),
    ) -> SelectorCollector:
        return cls(ignore=ignore, unmergeable=unmergeable, prefix=source.prefix, match=source.match)

    def transform(self, selector: str) -> str | None:
        """Return the selector to accumulate, or None if it is dropped."""
        if any(p.search(selector) for p in self.unmergeable):
            return None
        if any(p.search(selector) for p in self.ignore):
            return None
        return apply_prefix(normalize_combinators(selector), self.prefix, self.match)

    def collect(self, acc: SelectorAccumulator, key: str, selectors: Sequence[str]) -> None:
        acc.register(key)
        for selector in selectors:
            transformed = self.transform(selector)
            if transformed is not None:
                acc.add(key, transformed)
