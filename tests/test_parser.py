"""Tests for JSON parser."""

import pytest
from json2ts.parser import JSONParser
from json2ts.types import ProcessingError, ErrorType


class TestJSONParser:
    """Tests for JSONParser class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.parser = JSONParser()

    def test_parse_valid_object(self):
        """Test parsing a valid object document."""
        data = self.parser.parse('{"name": "Alice", "tags": ["a", "b"]}')

        assert data == {"name": "Alice", "tags": ["a", "b"]}

    def test_parse_preserves_key_order(self):
        """Test that document key order survives decoding."""
        data = self.parser.parse('{"z": 1, "a": 2, "m": 3}')

        assert list(data) == ["z", "a", "m"]

    def test_parse_invalid_json_syntax(self):
        """Test parsing invalid JSON syntax."""
        with pytest.raises(ProcessingError, match="Invalid JSON input") as exc_info:
            self.parser.parse('{"users": {"user1": {"name": "Alice"}')

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_parse_empty_json(self):
        """Test parsing empty JSON string."""
        with pytest.raises(ProcessingError, match="empty") as exc_info:
            self.parser.parse("   ")

        assert exc_info.value.error_type == ErrorType.SYNTAX

    @pytest.mark.parametrize("document", ['"just a string"', "[1, 2, 3]", "42", "null", "true"])
    def test_parse_non_object_root(self, document):
        """Test that non-object roots are rejected."""
        with pytest.raises(ProcessingError, match="Root element must be an object") as exc_info:
            self.parser.parse(document)

        assert exc_info.value.error_type == ErrorType.STRUCTURE

    def test_parse_bytes(self):
        """Test decoding UTF-8 bytes."""
        data = self.parser.parse_bytes('{"city": "Zürich"}'.encode("utf-8"))

        assert data == {"city": "Zürich"}

    def test_parse_infinity(self):
        """Test that Infinity is rejected."""
        with pytest.raises(ProcessingError, match="Infinity is not a valid JSON value") as exc_info:
            self.parser.parse('{"limit": -Infinity}')

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_parse_bytes_invalid_utf8(self):
        """Test bytes that are not UTF-8."""
        with pytest.raises(ProcessingError, match="not valid UTF-8") as exc_info:
            self.parser.parse_bytes(b'{"a": "\xff"}')

        assert exc_info.value.error_type == ErrorType.SYNTAX

    def test_structure_statistics(self, nested_json):
        """Test value counting."""
        stats = self.parser.get_structure_statistics(nested_json)

        assert stats["object_count"] == 5
        assert stats["array_count"] == 3
        assert stats["primitive_count"] == 9
        assert stats["max_depth"] == 4
