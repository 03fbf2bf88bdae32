"""Pytest configuration and fixtures."""

import pytest
import tempfile
import json
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def person_json():
    """Flat object with one nested object."""
    return {
        "name": "Alice",
        "age": 30,
        "tags": ["a", "b"],
        "address": {"city": "NYC"}
    }


@pytest.fixture
def nested_json():
    """Objects nested inside objects and arrays."""
    return {
        "metadata": {
            "version": "1.0",
            "author": {"name": "Bob", "active": True}
        },
        "data": [
            {"type": "A", "values": [1, 2, 3]},
            {"type": "B", "values": []}
        ],
        "note": None
    }


@pytest.fixture
def json_file(temp_dir, person_json):
    """Write the person document to disk."""
    path = temp_dir / "person.json"
    path.write_text(json.dumps(person_json), encoding="utf-8")
    return path
