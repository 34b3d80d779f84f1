"""Tests for the parse command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from digitlist.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestParseCommand:
    def test_human_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "135642"])
        assert result.exit_code == 0
        assert "OK  parse" in result.output
        assert "value: 135642" in result.output
        assert "digits: 6" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "0"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"] == {"value": "0", "digits": 1}

    def test_invalid_text_exits_1(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["parse", "0042"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "leading zero" in result.stderr
        assert "INVALID_FORMAT" in result.stderr

    def test_invalid_text_json_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "parse", "12x"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["ok"] is False
        assert data["error"]["code"] == "INVALID_FORMAT"
