"""Tests for the command-line interface."""

import json
from click.testing import CliRunner
from json2ts import __version__
from json2ts.cli import main


class TestCLI:
    """Tests for the json2ts command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_missing_argument_prints_usage(self):
        """Test usage message without an input file."""
        result = self.runner.invoke(main, [])

        assert result.exit_code == 0
        assert result.output == "Usage: json2ts <file>\n"

    def test_convert_file(self, json_file):
        """Test printing declarations for a file."""
        result = self.runner.invoke(main, [str(json_file)])

        assert result.exit_code == 0
        assert result.output.startswith("export interface Root {\n  name: string;\n")
        assert "export interface Interface1 {\n  city: string;\n}\n" in result.output

    def test_missing_file(self, temp_dir):
        """Test reporting an unreadable file."""
        result = self.runner.invoke(main, [str(temp_dir / "missing.json")])

        assert result.exit_code == 0
        assert "Error reading file:" in result.output

    def test_directory_argument(self, temp_dir):
        """Test reporting a directory passed as the input file."""
        result = self.runner.invoke(main, [str(temp_dir)])

        assert result.exit_code == 0
        assert "Error reading file:" in result.output

    def test_invalid_json(self, temp_dir):
        """Test reporting a parse failure."""
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        result = self.runner.invoke(main, [str(path)])

        assert result.exit_code == 0
        assert "Error parsing JSON:" in result.output

    def test_options(self, temp_dir):
        """Test ordering and naming flags."""
        path = temp_dir / "doc.json"
        path.write_text(json.dumps({"b": [1, "x"], "a": {"c": True}}), encoding="utf-8")
        result = self.runner.invoke(main, [
            str(path), "--sort-keys", "--sort-unions", "--completion-order",
            "--root-name", "Doc", "--prefix", "Part", "--indent", "4"
        ])

        assert result.exit_code == 0
        assert result.output == (
            "export interface Part1 {\n"
            "    c: boolean;\n"
            "}\n"
            "\n"
            "export interface Doc {\n"
            "    a: Part1;\n"
            "    b: (number | string)[];\n"
            "}\n"
        )

    def test_output_file(self, json_file, temp_dir):
        """Test writing declarations to a file."""
        output_path = temp_dir / "types.ts"
        result = self.runner.invoke(main, [str(json_file), "--output", str(output_path)])

        assert result.exit_code == 0
        assert "Wrote 2 interfaces" in result.output
        assert output_path.read_text(encoding="utf-8").startswith("export interface Root {")

    def test_version(self):
        """Test the version flag."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output
