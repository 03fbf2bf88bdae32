"""Validation utilities for JSON input."""

import json
from typing import Any, List, Tuple
from ..types import ValidationResult, ValidationError, ErrorType


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON syntax: {name} is not a valid JSON value")


def loads_strict(json_string: str) -> Any:
    """Decode JSON, rejecting the NaN and Infinity extensions."""
    return json.loads(json_string, parse_constant=_reject_constant)


class ValidationUtils:
    """Utility class for validating JSON documents before synthesis."""

    @staticmethod
    def validate_json_string(json_string: str, max_depth: int = 20) -> ValidationResult:
        """
        Validate JSON string syntax and structure.

        Args:
            json_string: JSON string to validate
            max_depth: Nesting depth above which a warning is reported

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        # Check if string is empty
        if not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        # Try to parse JSON
        try:
            data = loads_strict(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)
        except ValueError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=str(e),
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        structure_errors, structure_warnings = ValidationUtils.validate_structure(data, max_depth)
        errors.extend(structure_errors)
        warnings.extend(structure_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_structure(data: Any, max_depth: int = 20) -> Tuple[List[ValidationError], List[str]]:
        """Validate decoded JSON data."""
        errors = []
        warnings = []

        if not isinstance(data, dict):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be an object, got {type(data).__name__}",
                location="root"
            ))
            return errors, warnings

        depth = ValidationUtils.calculate_max_depth(data)
        if depth > max_depth:
            warnings.append(f"Deep nesting detected (depth: {depth}). "
                            "Very deep documents may exceed the recursion limit.")

        return errors, warnings

    @staticmethod
    def calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        """Calculate maximum nesting depth."""
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            max_child_depth = max(max_child_depth,
                                  ValidationUtils.calculate_max_depth(child, current_depth + 1))

        return max_child_depth
