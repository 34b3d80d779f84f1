"""Tests for digitlist.toml and env overrides reaching the commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from digitlist.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestConfigFile:
    def test_strategy_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "digitlist.toml").write_text(
            '[arithmetic]\nmultiply_strategy = "repeated-addition"\n'
        )
        result = cli_runner.invoke(cli, ["--json", "multiply", "11", "11"])
        data = json.loads(result.stdout)
        assert data["data"]["strategy"] == "repeated-addition"
        assert data["data"]["value"] == "121"

    def test_explicit_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        custom = tmp_path / "limits.toml"
        custom.write_text("[limits]\nmax_argument = 10\n")
        result = cli_runner.invoke(cli, ["-c", str(custom), "--json", "factorial", "11"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "LIMIT_EXCEEDED"

    def test_env_override(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DIGITLIST_LIMITS__MAX_ARGUMENT", "3")
        result = cli_runner.invoke(cli, ["power", "2", "4"])
        assert result.exit_code == 1
        assert "limits.max_argument" in result.stderr

    def test_truncated_human_output_warns(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "digitlist.toml").write_text("[output]\nmax_digits_shown = 5\n")
        result = cli_runner.invoke(cli, ["power", "2", "64"])
        assert result.exit_code == 0
        assert "18446… (+15 digits)" in result.stdout
        assert "WARNING: Result has 20 digits" in result.stderr

    def test_quiet_is_never_truncated(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "digitlist.toml").write_text("[output]\nmax_digits_shown = 5\n")
        result = cli_runner.invoke(cli, ["-q", "power", "2", "64"])
        assert result.stdout.strip() == str(2**64)

    def test_invalid_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "digitlist.toml").write_text("[output\n")
        result = cli_runner.invoke(cli, ["parse", "1"])
        assert result.exit_code == 1
        assert "Invalid TOML" in result.output

    def test_bad_value_names_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "digitlist.toml").write_text("[limits]\nmax_argument = -1\n")
        result = cli_runner.invoke(cli, ["parse", "1"])
        assert result.exit_code == 1
        assert "Invalid config in" in result.output
        assert "digitlist.toml" in result.output
        assert "limits.max_argument" in result.output

    def test_default_limit_refuses_huge_factorial(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "factorial", "100000"])
        assert result.exit_code == 1
        error = json.loads(result.stderr)["error"]
        assert error["code"] == "LIMIT_EXCEEDED"
        assert error["detail"]["limit"] == 10_000
