"""Type expression matching."""

from typing import Any
from xml.dom import Node

from .classify import coarse_type, is_nullish, refined_type

NULLABLE_MARKER = "?"
SEPARATOR = "|"
ELEMENT_LABEL = "element"


def _is_element(value: Any) -> bool:
    return isinstance(value, Node) and value.nodeType == Node.ELEMENT_NODE


def _is_iterable(value: Any) -> bool:
    return not is_nullish(value) and callable(getattr(value, "__iter__", None))


def _label_matches(label: str, value: Any, refined: str, coarse: str) -> bool:
    if label == ELEMENT_LABEL and _is_element(value):
        return True

    if label == "callable" and "function" in (refined, coarse):
        return True

    if label == "iterable":
        return _is_iterable(value)

    # "true"/"false" literals, and prefix matching so "bool" covers "boolean"
    if isinstance(value, bool) and label == str(value).lower():
        return True
    if label == refined[:4]:
        return True

    return label in (refined, coarse, "mixed")


def matches(expression: str, value: Any) -> bool:
    """
    Check whether a value satisfies a type expression.

    Expressions are ``|``-separated labels, optionally prefixed with ``?``
    to also accept ``None`` and ``UNDEFINED``. Labels are case-insensitive
    and tried left to right; the first matching label wins. Unknown labels
    never match.

    Example:
        matches("int|float", 3.14)   # True
        matches("?string", None)     # True
        matches("int|float", "3.14") # False
    """
    if expression.startswith(NULLABLE_MARKER):
        expression = expression[len(NULLABLE_MARKER):]
        if is_nullish(value):
            return True

    refined = refined_type(value)
    coarse = coarse_type(value)

    return any(
        _label_matches(label.lower(), value, refined, coarse)
        for label in expression.split(SEPARATOR)
    )
