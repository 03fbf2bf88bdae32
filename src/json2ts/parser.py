"""JSON parser that decodes input documents into a root object."""

import logging
from typing import Any, Dict, Optional
from .types import ProcessingError, ErrorType
from .error_handler import ErrorHandler
from .utils.validation import loads_strict


class JSONParser:
    """
    JSON parser with input validation.

    Decodes UTF-8 text or bytes and guarantees that the result is a JSON
    object, the only root shape the synthesizer accepts.
    """

    def __init__(self, error_handler: Optional[ErrorHandler] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the JSON parser.

        Args:
            error_handler: Optional ErrorHandler instance
            logger: Optional logger instance
        """
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logger or logging.getLogger(__name__)

    def parse(self, json_string: str) -> Dict[str, Any]:
        """
        Parse a JSON string whose root must be an object.

        Args:
            json_string: JSON string to parse

        Returns:
            Decoded root object

        Raises:
            ProcessingError: If JSON is invalid or the root is not an object
        """
        validation_result = self.error_handler.validate_input(json_string)
        for warning in validation_result.warnings:
            self.logger.warning(warning)

        if not validation_result.is_valid:
            error_messages = [error.message for error in validation_result.errors]
            raise ProcessingError(
                f"Invalid JSON input: {'; '.join(error_messages)}",
                validation_result.errors[0].type,
                context={"locations": [error.location for error in validation_result.errors]}
            )

        data = loads_strict(json_string)
        self.logger.info(f"Parsed JSON object with {len(data)} top-level keys")
        return data

    def parse_bytes(self, raw: bytes) -> Dict[str, Any]:
        """
        Decode UTF-8 bytes and parse them.

        Raises:
            ProcessingError: If the bytes are not UTF-8 or not a JSON object
        """
        try:
            json_string = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ProcessingError(
                f"Invalid JSON input: input is not valid UTF-8 ({e.reason} at byte {e.start})",
                ErrorType.SYNTAX,
                context={"position": e.start}
            )
        return self.parse(json_string)

    def get_structure_statistics(self, data: Any) -> Dict[str, int]:
        """
        Count the values in a decoded document.

        ``object_count`` equals the number of interfaces a conversion emits.
        """
        stats = {
            "object_count": 0,
            "array_count": 0,
            "primitive_count": 0,
            "max_depth": 0,
        }
        self._count_elements(data, stats, 0)
        return stats

    def _count_elements(self, data: Any, stats: Dict[str, int], depth: int) -> None:
        """Recursively count different types of elements."""
        stats["max_depth"] = max(stats["max_depth"], depth)

        if isinstance(data, dict):
            stats["object_count"] += 1
            for value in data.values():
                self._count_elements(value, stats, depth + 1)

        elif isinstance(data, list):
            stats["array_count"] += 1
            for item in data:
                self._count_elements(item, stats, depth + 1)

        else:
            stats["primitive_count"] += 1
