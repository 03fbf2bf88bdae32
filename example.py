#!/usr/bin/env python3
"""
Example usage of json2ts.

Converts a sample document into TypeScript interfaces and prints them.
"""

import json
from json2ts import JSONToTypeScript, SynthesizerOptions, KeyOrder


def main():
    """Main example function."""
    print("json2ts Example")
    print("=" * 50)

    sample_data = {
        "id": 42,
        "title": "Release notes",
        "published": True,
        "author": {
            "name": "Alice Johnson",
            "email": "alice@example.com"
        },
        "tags": ["release", "changelog"],
        "revisions": [
            {"number": 1, "summary": "Draft"},
            {"number": 2, "summary": None}
        ],
        "attachments": [],
        "scores": [4.5, "n/a", 3]
    }

    converter = JSONToTypeScript()
    result = converter.convert(json.dumps(sample_data))
    print(result.output)

    print("With sorted fields:")
    print("-" * 50)
    sorted_converter = JSONToTypeScript(SynthesizerOptions(key_order=KeyOrder.SORTED))
    print(sorted_converter.convert_data(sample_data).output)


if __name__ == "__main__":
    main()
