"""Enforcing constructors and predicates generated from the label catalog.

Every label gets three accessors: ``<label>`` validates and returns the value,
``_<label>`` does the same but also accepts nullish values, and
``is_<label>`` answers with a bool. ``mixed`` has no predicate since it would
always be true.

The generated names shadow builtins (``int``, ``float``, ``bool`` ...) inside
this module's namespace, so nothing below the generation loop may rely on
them.
"""

from types import MappingProxyType
from typing import Any, Callable

from .core.matcher import NULLABLE_MARKER, matches
from .core.validator import validate

CATALOG = (
    "int",
    "float",
    "string",
    "bool",
    "array",
    "object",
    "callable",
    "iterable",
    "mixed",
    "null",
    "false",
    "true",
)


def _enforcer(expression: str) -> Callable[[Any], Any]:
    def enforce(value: Any) -> Any:
        return validate(expression, value)

    enforce.__doc__ = f"Return ``value`` if it matches ``{expression}``, else raise TypeValidationError."
    return enforce


def _predicate(expression: str) -> Callable[[Any], bool]:
    def predicate(value: Any) -> bool:
        return matches(expression, value)

    predicate.__doc__ = f"True if ``value`` matches ``{expression}``."
    return predicate


def _build(catalog: tuple) -> dict:
    accessors = {}
    for label in catalog:
        accessors[label] = _enforcer(label)
        accessors["_" + label] = _enforcer(NULLABLE_MARKER + label)
        if label != "mixed":
            accessors["is_" + label] = _predicate(label)

    for name, func in accessors.items():
        func.__name__ = func.__qualname__ = name
        func.__module__ = __name__
    return accessors


ACCESSORS = MappingProxyType(_build(CATALOG))

globals().update(ACCESSORS)

__all__ = ["CATALOG", "ACCESSORS", *ACCESSORS]
