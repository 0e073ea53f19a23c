"""Value classification: coarse runtime kinds and refined semantic types."""

import datetime
import enum
import math
import re
import types
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Optional


class _Undefined:
    """Marker for a value that was never supplied."""

    _instance: Optional["_Undefined"] = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED = _Undefined()

# Ordered: bool before number since bool subclasses int.
CLASS_TAGS: tuple[tuple[tuple[type, ...], str], ...] = (
    ((bool,), "boolean"),
    ((int, float, Decimal, Fraction), "number"),
    ((str,), "string"),
    ((types.FunctionType, types.BuiltinFunctionType, types.MethodType), "function"),
    ((list, tuple), "array"),
    ((datetime.date, datetime.time), "date"),
    ((re.Pattern,), "regexp"),
    ((dict,), "object"),
    ((BaseException,), "error"),
    ((enum.Enum,), "symbol"),
)

# Exact builtin constructors and the names their values are reported under.
CONSTRUCTOR_ALIASES: dict[type, str] = {
    bool: "boolean",
    int: "number",
    float: "number",
    Decimal: "number",
    Fraction: "number",
    str: "string",
    list: "array",
    tuple: "array",
    dict: "object",
    object: "object",
    re.Pattern: "regexp",
    types.FunctionType: "function",
    types.BuiltinFunctionType: "function",
    types.MethodType: "function",
}

FLOAT_PATTERN = re.compile(r"^-?\d*\.\d+$")


def is_nullish(value: Any) -> bool:
    """True for ``None`` and ``UNDEFINED``."""
    return value is None or value is UNDEFINED


def _nullish_name(value: Any) -> str:
    return "null" if value is None else "undefined"


def _class_tag(value: Any) -> Optional[str]:
    for classes, name in CLASS_TAGS:
        if isinstance(value, classes):
            return name
    return None


def coarse_type(value: Any) -> str:
    """
    Return the runtime-level kind of a value.

    Primitives and callables report their own kind; every other object is
    looked up in the class-tag table and falls back to ``"object"``.

    Example:
        coarse_type(None)       # "null"
        coarse_type(3.5)        # "number"
        coarse_type(print)      # "function"
        coarse_type([1, 2])     # "array"
    """
    if is_nullish(value):
        return _nullish_name(value)

    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal, Fraction)):
        return "number"
    if isinstance(value, str):
        return "string"
    if callable(value):
        return "function"

    return _class_tag(value) or "object"


def _constructor_alias(value: Any) -> Optional[str]:
    return CONSTRUCTOR_ALIASES.get(type(value))


def _constructor_name(value: Any) -> Optional[str]:
    name = getattr(type(value), "__name__", "")
    return name.lower() or None


# Tried in order; the first strategy returning a name wins.
_STRATEGIES: tuple[Callable[[Any], Optional[str]], ...] = (
    _constructor_alias,
    _constructor_name,
    _class_tag,
)


def is_finite(value: Any) -> bool:
    """Finiteness test that tolerates ints and fractions too large for a float."""
    if isinstance(value, (int, Fraction)):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    return math.isfinite(value)


def is_integral(value: Any) -> bool:
    """True when a finite number has no fractional part."""
    if isinstance(value, int):
        return True
    if isinstance(value, Fraction):
        return value.denominator == 1
    if isinstance(value, Decimal):
        return value == value.to_integral_value()
    return float(value).is_integer()


def number_text(value: Any) -> str:
    """Decimal text of a number, with integral floats written without a remainder."""
    if isinstance(value, float):
        return format(value, "g") if value.is_integer() else repr(value)
    return str(value)


def refined_type(value: Any) -> str:
    """
    Return the semantic type of a value.

    Numbers are reported as ``"int"`` or ``"float"``; other values by their
    lower-cased constructor name, with builtin constructors mapped onto
    their portable names (``"string"``, ``"array"``, ``"object"`` ...).

    Example:
        refined_type(12)          # "int"
        refined_type(12.0)        # "int"
        refined_type(12.5)        # "float"
        refined_type(float("inf"))  # "int"
        refined_type("x")         # "string"
        refined_type(Point(1, 2)) # "point"
    """
    if is_nullish(value):
        return _nullish_name(value)

    name = None
    for strategy in _STRATEGIES:
        name = strategy(value)
        if name:
            break
    name = name or "object"

    if name == "number":
        name = "int"
        if is_finite(value) and (
            FLOAT_PATTERN.match(number_text(value)) or not is_integral(value)
        ):
            name = "float"

    return name
