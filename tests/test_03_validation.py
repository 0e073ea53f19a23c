"""Test enforcing validation.

Covers validate, validate_map, define and the error they raise.
"""

import logging
import pickle

import pytest

from typeh import (
    UNDEFINED,
    Enforcer,
    TypeValidationError,
    define,
    set_type,
    validate,
    validate_map,
)


@pytest.mark.validation
@pytest.mark.unit
class TestValidate:
    """Test single-value validation."""

    def test_returns_same_object(self):
        """Test the value itself is returned, not a copy."""
        data = [1, 2, 3]
        assert validate("array", data) is data

    def test_nullable(self):
        """Test ? expressions pass nullish values through."""
        assert validate("?int", None) is None
        assert validate("?int", UNDEFINED) is UNDEFINED

    def test_mismatch_raises(self):
        """Test a mismatch raises with expected and actual types."""
        with pytest.raises(TypeValidationError) as info:
            validate("int", "5")
        assert info.value.expected == "int"
        assert info.value.actual == "string"
        assert str(info.value) == "The value must be of type [int], [string] given."

    def test_expression_kept_as_given(self):
        """Test the error reports the expression unchanged."""
        with pytest.raises(TypeValidationError) as info:
            validate("?Int|Float", "x")
        assert info.value.expected == "?Int|Float"

    def test_error_is_type_error(self):
        """Test callers can catch TypeError."""
        with pytest.raises(TypeError):
            validate("float", 1)

    def test_error_pickles(self):
        """Test the error survives pickling."""
        error = pickle.loads(pickle.dumps(TypeValidationError("int", "string")))
        assert (error.expected, error.actual) == ("int", "string")

    def test_mismatch_is_logged(self, caplog):
        """Test mismatches are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="typeh"):
            with pytest.raises(TypeValidationError):
                validate("bool", "yes")
        assert "expected bool, got string" in caplog.text


@pytest.mark.validation
@pytest.mark.integration
class TestValidateMap:
    """Test bulk validation."""

    def test_all_valid(self):
        """Test a valid mapping passes."""
        assert validate_map({"string": "Foo", "?int": None, "bool": True}) is None

    def test_first_failure_raised(self):
        """Test the failing entry is reported."""
        with pytest.raises(TypeValidationError) as info:
            validate_map({"string": "Foo", "?int": None, "bool": "yes"})
        assert info.value.expected == "bool"
        assert info.value.actual == "string"

    def test_order(self):
        """Test entries are checked in insertion order."""
        with pytest.raises(TypeValidationError) as info:
            validate_map({"int": "a", "float": "b"})
        assert info.value.expected == "int"

    def test_set_type_alias(self):
        """Test set_type is the same entry point."""
        assert set_type is validate_map


@pytest.mark.validation
@pytest.mark.unit
class TestDefine:
    """Test ad-hoc enforcing constructors."""

    def test_enforces_expression(self):
        """Test the constructor validates and returns."""
        port = define("int|string")
        assert port(8080) == 8080
        assert port("http") == "http"
        with pytest.raises(TypeValidationError) as info:
            port(1.5)
        assert info.value.actual == "float"

    def test_optional_variant(self):
        """Test .optional accepts nullish values."""
        port = define("int")
        assert port.optional(None) is None
        assert port.optional.expression == "?int"
        assert port.optional.optional == port.optional
        with pytest.raises(TypeValidationError):
            port(None)

    def test_equality(self):
        """Test enforcers compare by expression."""
        assert define("int") == Enforcer("int")
        assert define("int") != define("float")
        assert len({define("int"), define("int")}) == 1
