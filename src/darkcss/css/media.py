"""Evaluate media query lists against a fixed DeviceProfile."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer

from darkcss.config import DeviceProfile
from darkcss.errors import MediaQueryError

__all__ = ["MediaQuery", "match_media", "parse_media_query"]

GRAMMAR_PATH = Path(__file__).parent / "media.lark"

_NUMBER_RE = re.compile(r"^(-?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)([a-z%]*)$")

# Conversion factors to px / dpi.
_LENGTHS = {
    "": 1.0,
    "px": 1.0,
    "em": 16.0,
    "rem": 16.0,
    "in": 96.0,
    "cm": 96.0 / 2.54,
    "mm": 96.0 / 25.4,
    "pt": 96.0 / 72.0,
    "pc": 16.0,
}
_RESOLUTIONS = {"": 1.0, "dpi": 1.0, "dpcm": 2.54, "dppx": 96.0, "x": 96.0}

_LENGTH_FEATURES = {"width", "height", "device-width", "device-height"}
_RATIO_FEATURES = {"aspect-ratio", "device-aspect-ratio", "device-pixel-ratio"}
_KEYWORD_FEATURES = {"orientation", "scan"}
_INTEGER_FEATURES = {"grid", "color", "color-index", "monochrome"}


@dataclass(frozen=True)
class Expression:
    feature: str
    value: str | None = None


@dataclass(frozen=True)
class MediaQuery:
    """One query of a comma-separated media query list."""

    type: str = "all"
    inverse: bool = False
    expressions: tuple[Expression, ...] = ()


class MediaTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into MediaQuery objects."""

    def value(self, items: list[Token]) -> str:
        return " ".join(str(t) for t in items)

    def expression(self, items: list[object]) -> Expression:
        value = str(items[1]).lower() if len(items) > 1 else None
        return Expression(feature=str(items[0]).lower(), value=value)

    def modifier(self, items: list[Token]) -> str:
        return str(items[0]).lower()

    def media_type(self, items: list[Token]) -> str:
        return str(items[0]).lower()

    def typed_query(self, items: list[object]) -> MediaQuery:
        modifier = None
        if len(items) > 1 and isinstance(items[1], str):
            modifier = items[0]
            items = items[1:]
        return MediaQuery(
            type=str(items[0]),
            inverse=modifier == "not",
            expressions=tuple(items[1:]),  # type: ignore[arg-type]
        )

    def bare_query(self, items: list[object]) -> MediaQuery:
        return MediaQuery(expressions=tuple(items))  # type: ignore[arg-type]

    def start(self, items: list[MediaQuery]) -> tuple[MediaQuery, ...]:
        return tuple(items)


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


@lru_cache(maxsize=4096)
def parse_media_query(query: str) -> tuple[MediaQuery, ...]:
    """Parse a media query list. Raises MediaQueryError on bad syntax."""
    try:
        tree = _parser().parse(query)
    except Exception as e:
        raise MediaQueryError(f"Invalid media query {query!r}: {e}", query=query, cause=e) from e
    return MediaTransformer().transform(tree)


def _to_number(value: str, units: dict[str, float]) -> float:
    m = _NUMBER_RE.match(value.strip())
    if not m:
        return math.nan
    return float(m.group(1)) * units.get(m.group(2), 1.0)


def _to_decimal(value: str) -> float:
    if "/" in value:
        num, _, den = value.partition("/")
        try:
            return float(num) / float(den)
        except (ValueError, ZeroDivisionError):
            return math.nan
    try:
        return float(value)
    except ValueError:
        return math.nan


def _to_int(value: str, default: int) -> int:
    try:
        return int(float(value)) or default
    except ValueError:
        return default


def _match_expression(expr: Expression, device: DeviceProfile) -> bool:
    modifier, feature = None, expr.feature
    if feature.startswith(("min-", "max-")):
        modifier, feature = feature[:3], feature[4:]

    actual = device.features().get(feature)
    if actual is None:
        return False
    if expr.value is None:
        return True

    if feature in _KEYWORD_FEATURES:
        return actual.lower() == expr.value
    if feature in _LENGTH_FEATURES:
        expected, current = _to_number(expr.value, _LENGTHS), _to_number(actual, _LENGTHS)
    elif feature == "resolution":
        expected, current = _to_number(expr.value, _RESOLUTIONS), _to_number(actual, _RESOLUTIONS)
    elif feature in _RATIO_FEATURES:
        expected, current = _to_decimal(expr.value), _to_decimal(actual)
    elif feature in _INTEGER_FEATURES:
        expected, current = _to_int(expr.value, 1), _to_int(actual, 0)
    else:
        return actual.lower() == expr.value

    if modifier == "min":
        return current >= expected
    if modifier == "max":
        return current <= expected
    return current == expected


def _match_query(query: MediaQuery, device: DeviceProfile) -> bool:
    # `not` inverts the type test only: `not screen and (...)` never matches a
    # screen, and `not print and (...)` always matches one.
    type_matched = query.type in ("all", device.type.lower())
    if type_matched == query.inverse:
        return False
    expressions_matched = all(_match_expression(expr, device) for expr in query.expressions)
    return expressions_matched or query.inverse


def match_media(query: str, device: DeviceProfile) -> bool:
    """True when any query of the list applies to ``device``.

    Raises MediaQueryError when the list cannot be parsed; callers decide
    how to treat that.
    """
    return any(_match_query(q, device) for q in parse_media_query(query))
