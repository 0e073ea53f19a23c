"""Function decorators for runtime type validation."""

from .typed import typed

__all__ = ["typed"]
