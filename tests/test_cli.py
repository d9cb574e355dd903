"""
Tests for the campus command line interface
"""

import json

from click.testing import CliRunner

from campus.cli import cli


def test_seed_prints_dataset():
    result = CliRunner().invoke(cli, ["seed"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert [u["name"] for u in data["users"]] == ["zero", "one", "prof"]
    assert len(data["courses"]) == 3


def test_schema_prints_sdl():
    result = CliRunner().invoke(cli, ["schema"])

    assert result.exit_code == 0
    assert "type Query" in result.output
    assert "interface User" in result.output
