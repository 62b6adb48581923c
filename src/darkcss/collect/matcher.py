"""Match parsed declarations against the mapping table."""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterator, Sequence
from dataclasses import dataclass

from darkcss.collect.accumulator import SelectorAccumulator, SourceResult
from darkcss.collect.selectors import SelectorCollector
from darkcss.config import DeviceProfile, Source
from darkcss.css.media import match_media
from darkcss.css.model import MediaBlock, StyleRule, StyleSheet
from darkcss.css.parser import parse_stylesheet
from darkcss.css.values import values_equal
from darkcss.errors import MediaQueryError
from darkcss.mapping.model import IMPORTANT_SUFFIX, MappingTable

__all__ = ["DeclarationMatcher", "Match", "collect_source"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Match:
    """A matched declaration: the accumulator key and its rule's raw selectors."""

    key: str
    selectors: tuple[str, ...]


class DeclarationMatcher:
    """Find declarations whose property/value appear in the mapping table."""

    def __init__(
        self,
        table: MappingTable,
        device: DeviceProfile,
        shorthands: Collection[str] = (),
    ) -> None:
        self._device = device
        self._shorthands = frozenset(shorthands)
        self._by_property: dict[str, list[tuple[str, str]]] = {}
        for entry in table:
            self._by_property.setdefault(entry.prop, []).append((entry.from_key, entry.value))

    def media_applies(self, query: str) -> bool:
        """Whether rules under ``@media <query>`` apply to the device.

        Queries that cannot be evaluated count as applying.
        """
        try:
            return match_media(query, self._device)
        except MediaQueryError as exc:
            logger.debug("Treating unparseable media query as matching: %s", exc)
            return True

    def rules(self, stylesheet: StyleSheet) -> Iterator[StyleRule]:
        """Yield the style rules that apply to the device, in source order."""
        for item in stylesheet.items:
            if isinstance(item, MediaBlock):
                if self.media_applies(item.query):
                    yield from item.rules
            elif item.selectors:
                yield item

    def match_rule(self, rule: StyleRule) -> Iterator[Match]:
        if not rule.selectors:
            return
        for decl in rule.declarations:
            if not decl.value:
                continue
            for from_key, value in self._by_property.get(decl.property, ()):
                if not values_equal(decl.property, decl.value, value, self._shorthands):
                    continue
                key = from_key + IMPORTANT_SUFFIX if decl.important else from_key
                yield Match(key=key, selectors=rule.selectors)

    def matches(self, stylesheet: StyleSheet) -> Iterator[Match]:
        for rule in self.rules(stylesheet):
            yield from self.match_rule(rule)


def collect_source(
    source: Source,
    css: str,
    matcher: DeclarationMatcher,
    ignore: Sequence[re.Pattern[str]] = (),
    unmergeable: Sequence[re.Pattern[str]] = (),
) -> SourceResult:
    """Parse one source's CSS and collect its selectors into a SourceResult."""
    collector = SelectorCollector.for_source(source, ignore=ignore, unmergeable=unmergeable)
    acc = SelectorAccumulator()
    for match in matcher.matches(parse_stylesheet(css)):
        collector.collect(acc, match.key, match.selectors)
    result = SourceResult(url=source.url, selectors=acc.freeze())
    logger.info(
        "Collected %d selectors under %d keys from %s",
        result.match_count,
        len(result.selectors),
        source.url,
    )
    return result
