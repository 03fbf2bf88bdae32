"""Tests for validation utilities."""

import json
from json2ts.utils.validation import ValidationUtils
from json2ts.types import ErrorType


def _nested(levels):
    data = {}
    current = data
    for i in range(levels):
        current[f"level_{i}"] = {}
        current = current[f"level_{i}"]
    return data


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_valid_json(self):
        """Test validation of valid JSON string."""
        result = ValidationUtils.validate_json_string('{"users": {"user1": {"name": "Alice"}}}')

        assert result.is_valid
        assert len(result.errors) == 0
        assert result.warnings == []

    def test_validate_empty_json(self):
        """Test validation of empty JSON string."""
        result = ValidationUtils.validate_json_string("")

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message.lower()

    def test_validate_invalid_json_syntax(self):
        """Test validation of invalid JSON syntax."""
        result = ValidationUtils.validate_json_string('{"users": {"user1": {"name": "Alice"}')

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "syntax" in result.errors[0].message.lower()
        assert result.errors[0].location.startswith("line 1")

    def test_validate_nan_rejected(self):
        """Test that non-standard constants are syntax errors."""
        result = ValidationUtils.validate_json_string('{"x": NaN, "y": 1}')

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "NaN" in result.errors[0].message

    def test_validate_array_root(self):
        """Test that an array root is rejected."""
        result = ValidationUtils.validate_json_string('[{"a": 1}]')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE
        assert "Root element must be an object, got list" in result.errors[0].message

    def test_validate_deep_nesting_warning(self):
        """Test warning for deep nesting."""
        result = ValidationUtils.validate_json_string(json.dumps(_nested(25)))

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "Deep nesting" in result.warnings[0]

    def test_validate_custom_depth_threshold(self):
        """Test the configurable depth threshold."""
        document = json.dumps(_nested(5))

        assert ValidationUtils.validate_json_string(document, max_depth=10).warnings == []
        assert len(ValidationUtils.validate_json_string(document, max_depth=3).warnings) == 1

    def test_calculate_max_depth(self):
        """Test depth calculation."""
        assert ValidationUtils.calculate_max_depth("x") == 0
        assert ValidationUtils.calculate_max_depth({}) == 0
        assert ValidationUtils.calculate_max_depth({"a": 1}) == 1
        assert ValidationUtils.calculate_max_depth({"a": [[1]]}) == 3
