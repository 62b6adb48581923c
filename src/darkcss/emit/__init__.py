from darkcss.emit.emitter import BEGIN_MARKER, END_MARKER, RuleEmitter, important_template
from darkcss.emit.formatter import CssFormatter, split_declarations

__all__ = [
    "BEGIN_MARKER",
    "END_MARKER",
    "RuleEmitter",
    "important_template",
    "CssFormatter",
    "split_declarations",
]
