"""Decorator validating call arguments and return values."""

import functools
import inspect
import warnings
from typing import Any, Callable, Optional, TypeVar, cast

from ..core.validator import TypeValidationError, validate

F = TypeVar('F', bound=Callable[..., Any])


def typed(*, returns: Optional[str] = None, strict: bool = True, **params: str) -> Callable[[F], F]:
    """
    Decorator for validating a function's arguments and return value at call time.

    Args:
        returns: Type expression for the return value
        strict: Raise on type errors (vs warn)
        **params: Type expression per parameter name

    Example:
        @typed(name="string", limit="?int", returns="array")
        def search(name, limit=None):
            ...
    """
    def decorator(func: F) -> F:
        sig = inspect.signature(func)
        unknown = set(params) - set(sig.parameters)
        if unknown:
            raise TypeError(
                f"{func.__name__}() has no parameter(s) {', '.join(sorted(unknown))}"
            )

        def check(expression: str, value: Any, context: str) -> None:
            try:
                validate(expression, value)
            except TypeValidationError as e:
                if strict:
                    raise
                warnings.warn(f"Type error in {func.__name__}() {context}: {e}", stacklevel=3)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            for name, expression in params.items():
                value = bound.arguments[name]
                check(expression, value, f"argument '{name}'")

            result = func(*args, **kwargs)

            if returns is not None:
                check(returns, result, "return value")

            return result

        types = dict(params)
        if returns is not None:
            types["return"] = returns
        wrapper.__typeh_types__ = types
        wrapper.__typeh_strict__ = strict

        return cast(F, wrapper)

    return decorator
