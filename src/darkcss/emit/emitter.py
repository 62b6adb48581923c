"""Build the auto-generated rule block from accumulated selectors."""

from __future__ import annotations

import logging

from darkcss.collect.accumulator import SelectorAccumulator
from darkcss.emit.formatter import CssFormatter
from darkcss.mapping.model import MappingEntry, MappingTable

__all__ = ["BEGIN_MARKER", "END_MARKER", "RuleEmitter", "important_template"]

logger = logging.getLogger(__name__)

BEGIN_MARKER = '/* begin auto-generated rules - use "darkcss generate" to generate them */'
END_MARKER = "/* end auto-generated rules */"


def _strip_template(template: str) -> str:
    template = template.strip()
    return template[:-1] if template.endswith(";") else template


def important_template(template: str) -> str:
    """Append ``!important`` to every declaration of ``template``."""
    return ";".join(f"{part} !important" for part in _strip_template(template).split(";"))


class RuleEmitter:
    """Emit one rule (and one ``!important`` rule) per mapping entry, in table order."""

    def __init__(
        self,
        table: MappingTable,
        formatter: CssFormatter | None = None,
        indent: str = "  ",
    ) -> None:
        self._table = table
        self._formatter = formatter or CssFormatter()
        self._indent = indent

    def emit_entry(self, entry: MappingEntry, acc: SelectorAccumulator) -> str:
        """Rules for a single entry; empty when it collected no selectors."""
        out = ""
        normal = acc.get(entry.from_key)
        if normal:
            out += f'/* auto-generated rule for "{entry.from_key}" */\n'
            out += self._formatter.format_rule(normal, _strip_template(entry.to_template))

        important = acc.get(entry.important_key)
        if important:
            out += f'/* auto-generated rule for "{entry.important_key}" */\n'
            out += self._formatter.format_rule(important, important_template(entry.to_template))
        return out

    def emit(self, acc: SelectorAccumulator) -> str:
        """The full marker-delimited block, every line indented."""
        parts = [BEGIN_MARKER + "\n"]
        emitted = 0
        for entry in self._table:
            text = self.emit_entry(entry, acc)
            if text:
                emitted += 1
                parts.append(text)
        parts.append(END_MARKER)
        logger.info("Emitted rules for %d of %d mapping entries", emitted, len(self._table))
        return "\n".join(self._indent + line for line in "".join(parts).split("\n"))
