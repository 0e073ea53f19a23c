"""Validation utilities."""

import logging
from typing import Any, Callable, Mapping

from .classify import refined_type
from .matcher import NULLABLE_MARKER, matches

logger = logging.getLogger(__name__)


class TypeValidationError(TypeError):
    """Raised when a value does not satisfy a type expression."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"The value must be of type [{expected}], [{actual}] given.")

    def __reduce__(self):
        return type(self), (self.expected, self.actual)


def validate(expression: str, value: Any) -> Any:
    """
    Validate a value against a type expression and return it unchanged.

    Example:
        validate("int", 5)          # 5
        validate("?string", None)   # None
        validate("int", "5")        # raises TypeValidationError
    """
    if not matches(expression, value):
        actual = refined_type(value)
        logger.debug("type mismatch: expected %s, got %s", expression, actual)
        raise TypeValidationError(expression, actual)
    return value


def validate_map(options: Mapping[str, Any]) -> None:
    """
    Validate several values at once.

    Keys are type expressions and values the data to check; entries are
    checked in iteration order and the first failure is raised.

    Example:
        validate_map({"string": name, "?int": limit, "bool": verbose})
    """
    for expression, value in options.items():
        validate(expression, value)


set_type = validate_map


class Enforcer:
    """Enforcing constructor for an ad-hoc type expression."""

    def __init__(self, expression: str):
        self.expression = expression

    def __call__(self, value: Any) -> Any:
        return validate(self.expression, value)

    @property
    def optional(self) -> "Enforcer":
        """The same expression, also accepting nullish values."""
        if self.expression.startswith(NULLABLE_MARKER):
            return self
        return Enforcer(NULLABLE_MARKER + self.expression)

    def __repr__(self) -> str:
        return f"Enforcer({self.expression!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Enforcer) and other.expression == self.expression

    def __hash__(self) -> int:
        return hash((Enforcer, self.expression))


def define(expression: str) -> Callable[[Any], Any]:
    """
    Build an enforcing constructor for any type expression.

    Example:
        port = define("int|string")
        port(8080)            # 8080
        port.optional(None)   # None
        port(1.5)             # raises TypeValidationError
    """
    return Enforcer(expression)
