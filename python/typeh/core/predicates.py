"""Predicates with logic beyond a single type label."""

import math
import re
from collections.abc import Mapping, Set
from decimal import Decimal
from typing import Any

from .classify import coarse_type, is_finite, is_integral, is_nullish
from .matcher import matches

# Largest integer a binary64 float holds exactly.
MAX_SAFE_INTEGER = 2 ** 53 - 1

_NUMERIC_TEXT = re.compile(
    r"""
    ^\s*(?:
        (?P<decimal>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)
      | 0[xX][0-9a-fA-F]+
      | 0[oO][0-7]+
      | 0[bB][01]+
    )\s*$
    """,
    re.VERBOSE | re.ASCII,
)


def _length_of(value: Any) -> Any:
    if type(value) is dict:
        return value.get("length")
    return getattr(value, "length", None)


def is_countable(value: Any) -> bool:
    """
    True for arrays, sets and keyed collections, and for objects carrying an
    integer ``length``.

    A plain ``dict`` is treated as a record, so it only counts when it has a
    ``"length"`` key.
    """
    if matches("array", value):
        return True
    if isinstance(value, Set) or (isinstance(value, Mapping) and type(value) is not dict):
        return True
    return (
        not is_nullish(value)
        and matches("object", value)
        and matches("int", _length_of(value))
    )


def _numeric_text(text: str) -> bool:
    match = _NUMERIC_TEXT.match(text)
    if match is None:
        return False
    # Decimal text can still overflow to infinity, e.g. "1e400"
    return match.group("decimal") is None or math.isfinite(float(match.group("decimal")))


def is_numeric(value: Any) -> bool:
    """True for finite ints and for text that reads as a finite number."""
    if matches("string", value):
        return _numeric_text(value)
    return coarse_type(value) == "number" and matches("int", value) and is_finite(value)


def is_long(value: Any) -> bool:
    """True for values that are ints and exactly integral.

    Python ints are exact at any size; other numbers must also sit within
    the range a float represents exactly.
    """
    if not matches("int", value) or coarse_type(value) != "number":
        return False
    if isinstance(value, int):
        return True
    if not is_finite(value) or not is_integral(value):
        return False
    return abs(value) <= MAX_SAFE_INTEGER


def is_scalar(value: Any) -> bool:
    return matches("string|bool", value) or (
        coarse_type(value) == "number" and is_finite(value)
    )


def is_infinite(value: Any) -> bool:
    if coarse_type(value) != "number" or is_finite(value):
        return False
    if isinstance(value, Decimal):
        return value.is_infinite()
    return value == value
