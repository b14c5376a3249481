"""Tests for value validation."""

import pytest
from tide_config import ConfigValidationError
from tide_config import ConfigValue
from tide_config import UnsupportedTypeError
from tide_config.validation import validate


class TestValidate:
    """Test validate function."""

    def test_string_always_valid(self):
        """Test any literal is accepted for string."""
        validate(ConfigValue("", "string"))
        validate(ConfigValue("123", "string"))

    def test_integer(self):
        """Test integer literals."""
        validate(ConfigValue("5432", "integer"))
        validate(ConfigValue("-1", "integer"))
        with pytest.raises(ConfigValidationError):
            validate(ConfigValue("54x", "integer"))

    def test_bool_canonical_literals(self):
        """Test canonical bool literals are accepted."""
        validate(ConfigValue("true", "bool"))
        validate(ConfigValue("False", "bool"))
        with pytest.raises(ConfigValidationError):
            validate(ConfigValue("yes", "bool"))

    def test_string_array(self):
        """Test string arrays, with and without element type."""
        validate(ConfigValue("[auth, billing, search]", "array[string]"))
        validate(ConfigValue("[auth, billing]", "array"))

    def test_string_array_rejects_integers(self):
        """Test integer-looking elements under array[string] fail."""
        with pytest.raises(ConfigValidationError, match="expected string, got integer"):
            validate(ConfigValue("[1, 2]", "array[string]"))
        with pytest.raises(ConfigValidationError):
            validate(ConfigValue("[a, 2]", "array"))

    def test_integer_array(self):
        """Test integer arrays."""
        validate(ConfigValue("[1, 2, 3]", "array[integer]"))
        with pytest.raises(ConfigValidationError):
            validate(ConfigValue("[1, x, 3]", "array[integer]"))

    def test_array_requires_brackets(self):
        """Test array literals must be bracket-delimited."""
        with pytest.raises(ConfigValidationError, match="invalid array format"):
            validate(ConfigValue("1, 2, 3", "array[integer]"))

    def test_unsupported_element_type(self):
        """Test unknown array element types."""
        with pytest.raises(UnsupportedTypeError, match="unsupported array element type: float") as exc_info:
            validate(ConfigValue("[1.5]", "array[float]"))
        assert exc_info.value.type_tag == "float"

    def test_empty_element_type(self):
        """Test array[] names no element type and is rejected."""
        with pytest.raises(UnsupportedTypeError, match="unsupported array element type") as exc_info:
            validate(ConfigValue("[a]", "array[]"))
        assert exc_info.value.type_tag == ""

    @pytest.mark.parametrize("tag", ["arrayfoo", "array[integer", "arrays"])
    def test_malformed_array_tag(self, tag):
        """Test tags that only start like an array tag are unsupported types."""
        with pytest.raises(UnsupportedTypeError, match="unsupported type: ") as exc_info:
            validate(ConfigValue("[1]", tag))
        assert exc_info.value.type_tag == tag

    def test_unsupported_type(self):
        """Test unknown type tags."""
        with pytest.raises(UnsupportedTypeError, match="unsupported type: float"):
            validate(ConfigValue("1.5", "float"))

    def test_error_names_key(self):
        """Test the key is part of the error."""
        with pytest.raises(ConfigValidationError) as exc_info:
            validate(ConfigValue("abc", "integer"), key="database.port")
        assert exc_info.value.key == "database.port"
        assert "database.port" in str(exc_info.value)
