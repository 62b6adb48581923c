"""Expand an author-written mapping table into concrete MappingEntry records.

Keys are either plain ``"<property>: <value>"`` strings or one of the
pseudo keys below, which stand for a whole family of declarations:

    $border: #ddd      -> border / border-<side> shorthands and -color forms
    $background: #fff  -> background and background-color
"""

from __future__ import annotations

from collections.abc import Iterable

from darkcss.errors import MappingError
from darkcss.mapping.model import MappingEntry, MappingTable

__all__ = ["expand_mappings", "expand_pseudo"]

BORDER_PSEUDO = "$border: "
BACKGROUND_PSEUDO = "$background: "

_SIDES = ("top", "bottom", "left", "right")

# Width/style combinations matched on the "border" and "border-<side>" shorthands.
_STYLES = ("1px solid", "1px dashed", "2px solid", "2px dashed", "5px solid")


def _border_entries(old: str, new: str) -> list[MappingEntry]:
    entries = [
        MappingEntry(f"border: {style} {old}", f"border-color: {new}")
        for style in _STYLES
    ]
    entries.append(MappingEntry(f"border-color: {old}", f"border-color: {new}"))
    for style in _STYLES:
        for side in _SIDES:
            entries.append(
                MappingEntry(f"border-{side}: {style} {old}", f"border-{side}-color: {new}")
            )
    for side in _SIDES:
        entries.append(
            MappingEntry(f"border-{side}-color: {old}", f"border-{side}-color: {new}")
        )
    return entries


def _background_entries(old: str, new: str) -> list[MappingEntry]:
    return [
        MappingEntry(f"background: {old}", f"background: {new}"),
        MappingEntry(f"background-color: {old}", f"background-color: {new}"),
    ]


def expand_pseudo(key: str, value: str) -> list[MappingEntry]:
    """Expand a single author table row into concrete entries."""
    if key.startswith(BORDER_PSEUDO):
        return _border_entries(key[len(BORDER_PSEUDO):], value)
    if key.startswith(BACKGROUND_PSEUDO):
        return _background_entries(key[len(BACKGROUND_PSEUDO):], value)
    if key.startswith("$"):
        raise MappingError(f"Unknown pseudo mapping key: {key!r}")
    return [MappingEntry(key, value)]


def expand_mappings(pairs: Iterable[tuple[str, str]]) -> MappingTable:
    """Build the flat, ordered mapping table from author rows.

    Rows are expanded in order; when two rows produce the same key, the
    later template wins and the entry stays where it first appeared.
    """
    table = MappingTable()
    for key, value in pairs:
        for entry in expand_pseudo(key, value):
            table.add(entry)
    return table
