#!/usr/bin/env python3

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from schema_to_ts.cli_utils import reconstruct_command_line
from schema_to_ts.schema_to_ts import schema_to_ts

PETSTORE = Path(__file__).parent / "test_data" / "documents" / "petstore.json"


class TestCliUtils:
    """Test cases for CLI utilities"""

    def test_reconstruct_command_line_without_context(self):
        """Without an active Click context the bare program name is returned"""
        assert reconstruct_command_line(schema_to_ts) == "schema_to_ts"


class TestCommand:
    def test_generate_selected_schema(self, tmp_path):
        output = tmp_path / "types.ts"
        result = CliRunner().invoke(schema_to_ts, [str(PETSTORE), str(output), "-n", "Tag", "--no-format"])
        assert result.exit_code == 0, result.output

        code = output.read_text()
        assert "export interface Tag {" in code
        assert "interface Pet" not in code

        header = code.splitlines()[0]
        assert "schema_to_ts petstore.json" in header
        assert "--name Tag" in header
        assert "--no-format" in header

    def test_deep_and_no_export(self, tmp_path):
        output = tmp_path / "types.ts"
        result = CliRunner().invoke(
            schema_to_ts,
            [str(PETSTORE), str(output), "-n", "Pet", "--deep", "--no-export", "--default-type", "any"],
        )
        assert result.exit_code == 0, result.output

        code = output.read_text()
        assert "interface Pet {" in code
        assert "export interface" not in code
        assert "category?: {" in code

    def test_config_file(self, tmp_path):
        config = tmp_path / "config.json"
        config.write_text(json.dumps({"schemas": ["Category"], "add_generation_comment": False}))
        output = tmp_path / "types.ts"

        result = CliRunner().invoke(schema_to_ts, [str(PETSTORE), str(output), "-c", str(config)])
        assert result.exit_code == 0, result.output
        assert output.read_text() == "export interface Category {\n  id?: number;\n  name?: string;\n}\n"

    def test_unknown_schema_fails(self, tmp_path):
        result = CliRunner().invoke(schema_to_ts, [str(PETSTORE), str(tmp_path / "out.ts"), "-n", "Nope"])
        assert result.exit_code != 0
        assert isinstance(result.exception, KeyError)


if __name__ == "__main__":
    pytest.main([__file__])
