"""Declaration value equivalence."""

from __future__ import annotations

import re
from collections.abc import Collection

__all__ = ["normalize_value", "values_equal"]

_IMPORTANT_RE = re.compile(r"!important$", re.IGNORECASE)


def normalize_value(value: str) -> str:
    """Strip a trailing ``!important``, trim and lower-case."""
    return _IMPORTANT_RE.sub("", value.strip()).strip().lower()


def values_equal(prop: str, a: str, b: str, shorthands: Collection[str] = ()) -> bool:
    """Compare two values of ``prop``.

    For shorthands the space-separated tokens are compared regardless of
    order, so ``1px solid red`` equals ``1px red solid``.
    """
    a = normalize_value(a)
    b = normalize_value(b)
    if prop in shorthands:
        return sorted(a.split(" ")) == sorted(b.split(" "))
    return a == b
