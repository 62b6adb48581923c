"""Mapping table model: MappingEntry and MappingTable."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from darkcss.errors import MappingError

IMPORTANT_SUFFIX = " !important"


@dataclass(frozen=True)
class MappingEntry:
    """One concrete "<property>: <value>" match key and its replacement.

    ``to_template`` holds one or more declarations separated by ``;``.
    It may span several lines and may carry ``/*[[...]]*/`` markers used
    for later manual color substitution.
    """

    from_key: str
    to_template: str

    def __post_init__(self) -> None:
        if ": " not in self.from_key:
            raise MappingError(f"Mapping key has no property: {self.from_key!r}")

    @property
    def prop(self) -> str:
        return self.from_key.partition(": ")[0]

    @property
    def value(self) -> str:
        return self.from_key.partition(": ")[2]

    @property
    def important_key(self) -> str:
        return self.from_key + IMPORTANT_SUFFIX


@dataclass
class MappingTable:
    """Ordered collection of MappingEntry records.

    Adding an existing key replaces its template but keeps the position
    of the first occurrence.
    """

    entries: list[MappingEntry] = field(default_factory=list)

    def __post_init__(self) -> None:
        entries, self.entries = self.entries, []
        self._index: dict[str, int] = {}
        for entry in entries:
            self.add(entry)

    def add(self, entry: MappingEntry) -> None:
        pos = self._index.get(entry.from_key)
        if pos is None:
            self._index[entry.from_key] = len(self.entries)
            self.entries.append(entry)
        else:
            self.entries[pos] = entry

    def get(self, from_key: str) -> MappingEntry | None:
        pos = self._index.get(from_key)
        return None if pos is None else self.entries[pos]

    def keys(self) -> list[str]:
        return [entry.from_key for entry in self.entries]

    def __contains__(self, from_key: object) -> bool:
        return from_key in self._index

    def __iter__(self) -> Iterator[MappingEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)
