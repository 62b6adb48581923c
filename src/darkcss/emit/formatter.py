"""Expanded-style CSS formatting for generated rules."""

from __future__ import annotations

import re
from collections.abc import Sequence

__all__ = ["CssFormatter", "split_declarations"]

_WS_RE = re.compile(r"\s+")


def split_declarations(body: str) -> list[str]:
    """Split a ``;``-separated declaration body into tidy ``prop: value`` strings."""
    declarations = []
    for raw in body.split(";"):
        raw = _WS_RE.sub(" ", raw).strip()
        if not raw:
            continue
        prop, sep, value = raw.partition(":")
        declarations.append(f"{prop.strip()}: {value.strip()}" if sep else raw)
    return declarations


class CssFormatter:
    """Lay out one rule per call.

    Selectors are joined with ``", "`` and wrapped so no line exceeds
    ``max_selector_length`` (a single longer selector gets a line of its
    own). Declarations go one per line, indented by ``indent_size``.
    """

    def __init__(self, max_selector_length: int = 76, indent_size: int = 2) -> None:
        self.max_selector_length = max_selector_length
        self.indent = " " * indent_size

    def wrap_selectors(self, selectors: Sequence[str]) -> list[str]:
        lines: list[str] = []
        current = ""
        last = len(selectors) - 1
        for i, selector in enumerate(selectors):
            piece = selector + ("," if i < last else "")
            candidate = f"{current} {piece}" if current else piece
            if current and len(candidate) > self.max_selector_length:
                lines.append(current)
                current = piece
            else:
                current = candidate
        lines.append(current)
        return lines

    def format_rule(self, selectors: Sequence[str], body: str) -> str:
        lines = self.wrap_selectors(selectors)
        lines[-1] += " {"
        lines.extend(f"{self.indent}{decl};" for decl in split_declarations(body))
        lines.append("}")
        return "\n".join(lines) + "\n"
