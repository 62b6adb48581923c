"""Selector accumulation: per-key ordered sets and the cross-source fold."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

__all__ = ["SelectorAccumulator", "SourceResult", "merge_results"]


class SelectorAccumulator:
    """Match key -> insertion-ordered, de-duplicated selector list.

    Selectors are compared by exact string equality. Nothing is ever
    removed once added.
    """

    def __init__(self) -> None:
        self._data: dict[str, dict[str, None]] = {}

    def register(self, key: str) -> None:
        self._data.setdefault(key, {})

    def add(self, key: str, selector: str) -> bool:
        """Add ``selector`` under ``key``. Returns False if it was already there."""
        bucket = self._data.setdefault(key, {})
        if selector in bucket:
            return False
        bucket[selector] = None
        return True

    def extend(self, key: str, selectors: Iterable[str]) -> None:
        self.register(key)
        for selector in selectors:
            self.add(key, selector)

    def get(self, key: str) -> list[str]:
        return list(self._data.get(key, ()))

    def keys(self) -> list[str]:
        return list(self._data)

    def freeze(self) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType({k: tuple(v) for k, v in self._data.items()})

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SelectorAccumulator({len(self._data)} keys)"


@dataclass(frozen=True)
class SourceResult:
    """Selectors collected from a single source, in collection order."""

    url: str
    selectors: Mapping[str, tuple[str, ...]]

    @property
    def match_count(self) -> int:
        return sum(len(v) for v in self.selectors.values())


def merge_results(results: Iterable[SourceResult]) -> SelectorAccumulator:
    """Fold per-source results, in the order given, into one accumulator.

    Per key, selectors are concatenated and duplicates collapse to their
    first occurrence, so the caller controls the output order by the
    order of ``results``.
    """
    merged = SelectorAccumulator()
    for result in results:
        for key, selectors in result.selectors.items():
            merged.extend(key, selectors)
    return merged
