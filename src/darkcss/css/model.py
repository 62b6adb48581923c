"""Rule tree model: Declaration, StyleRule, MediaBlock and StyleSheet dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Declaration:
    """A single ``property: value`` pair. ``value`` never carries ``!important``."""

    property: str
    value: str
    important: bool = False


@dataclass(frozen=True)
class StyleRule:
    """A qualified rule: a selector list and its declarations."""

    selectors: tuple[str, ...]
    declarations: tuple[Declaration, ...]


@dataclass(frozen=True)
class MediaBlock:
    """An ``@media`` block holding one level of nested style rules."""

    query: str
    rules: tuple[StyleRule, ...]


Item = Union[StyleRule, MediaBlock]


@dataclass(frozen=True)
class StyleSheet:
    """Top-level rules and media blocks in source order."""

    items: tuple[Item, ...]

    @property
    def rules(self) -> tuple[StyleRule, ...]:
        return tuple(item for item in self.items if isinstance(item, StyleRule))

    @property
    def media(self) -> tuple[MediaBlock, ...]:
        return tuple(item for item in self.items if isinstance(item, MediaBlock))
