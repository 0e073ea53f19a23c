"""Core classification and validation functionality."""

from .classify import UNDEFINED, coarse_type, is_nullish, refined_type
from .matcher import matches
from .predicates import is_countable, is_infinite, is_long, is_numeric, is_scalar
from .validator import Enforcer, TypeValidationError, define, set_type, validate, validate_map

__all__ = [
    "UNDEFINED",
    "coarse_type",
    "refined_type",
    "is_nullish",
    "matches",
    "is_countable",
    "is_numeric",
    "is_long",
    "is_scalar",
    "is_infinite",
    "TypeValidationError",
    "Enforcer",
    "define",
    "validate",
    "validate_map",
    "set_type",
]
