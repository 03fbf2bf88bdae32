"""Error handling implementation for json2ts."""

import logging
from typing import Optional
from .types import (
    ErrorHandlerInterface,
    ValidationResult,
    ValidationError,
    ErrorResponse,
    ProcessingError,
    ErrorType
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for conversion runs.

    Validates raw input before decoding and turns processing errors into
    user-facing suggestions. Every error is terminal for the run.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, max_depth_warning: int = 20):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
            max_depth_warning: Nesting depth above which validation warns
        """
        self.logger = logger or logging.getLogger(__name__)
        self.max_depth_warning = max_depth_warning

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data, self.max_depth_warning)
        except RecursionError as e:
            self.logger.error(f"Input nesting too deep to validate: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.STRUCTURE,
                    message=f"Input nesting too deep: {str(e)}",
                    location="input"
                )],
                warnings=[]
            )

    def handle_processing_error(self, error: ProcessingError) -> ErrorResponse:
        """
        Handle processing errors and provide a suggested action.

        Args:
            error: ProcessingError to handle

        Returns:
            ErrorResponse with the suggested action
        """
        self.logger.error(f"Processing error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.FILESYSTEM:
            action = "Check that the input file exists and is readable."
        elif error.error_type == ErrorType.SYNTAX:
            action = "Fix the JSON syntax of the input document."
        elif error.error_type == ErrorType.STRUCTURE:
            action = "Wrap the document in a JSON object; the root must be an object."
        else:
            action = "Unknown error type. Please check logs and retry."

        return ErrorResponse(can_recover=False, suggested_action=action)
