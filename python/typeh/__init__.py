"""typeh: runtime type detection, validation and enforcement for Python values."""

from typeh.core import (
    UNDEFINED,
    Enforcer,
    TypeValidationError,
    coarse_type,
    define,
    is_countable,
    is_infinite,
    is_long,
    is_nullish,
    is_numeric,
    is_scalar,
    matches,
    refined_type,
    set_type,
    validate,
    validate_map,
)
from typeh.decorators import typed
from typeh.environment import install, uninstall

# Generated accessors shadow int, float, bool, object and callable here.
from typeh.catalog import *  # noqa: F401,F403
from typeh.catalog import ACCESSORS, CATALOG

is_integer = ACCESSORS["is_int"]
is_double = ACCESSORS["is_float"]

__version__ = "1.0.1"

__all__ = [
    # Classification
    "UNDEFINED",
    "coarse_type",
    "refined_type",
    "is_nullish",
    # Matching and validation
    "matches",
    "validate",
    "validate_map",
    "set_type",
    "define",
    "Enforcer",
    "TypeValidationError",
    # Bespoke predicates
    "is_countable",
    "is_numeric",
    "is_long",
    "is_scalar",
    "is_infinite",
    "is_integer",
    "is_double",
    # Decorators
    "typed",
    # Environment
    "install",
    "uninstall",
    # Catalog
    "CATALOG",
    *ACCESSORS,
]
