"""Tests for the root digitlist CLI."""

import pytest
from click.testing import CliRunner

from digitlist import __version__
from digitlist.cli import cli

pytestmark = pytest.mark.usefixtures("_isolated_cwd")


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "digitlist" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


@pytest.mark.parametrize("flag", ["--json", "-q", "-v", "--log-json"])
def test_global_flag_accepted(cli_runner: CliRunner, flag: str) -> None:
    result = cli_runner.invoke(cli, [flag, "--version"])
    assert result.exit_code == 0


def test_config_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-c", "/tmp/does-not-exist.toml", "--version"])
    assert result.exit_code == 0


# --- Commands registered ---

EXPECTED_GROUPS = ["scale"]

EXPECTED_COMMANDS = ["parse", "add", "multiply", "factorial", "power"]


@pytest.mark.parametrize("group", EXPECTED_GROUPS)
def test_group_registered(cli_runner: CliRunner, group: str) -> None:
    result = cli_runner.invoke(cli, [group, "--help"])
    assert result.exit_code == 0, f"{group} --help failed: {result.output}"


@pytest.mark.parametrize("command", EXPECTED_COMMANDS)
def test_command_registered(cli_runner: CliRunner, command: str) -> None:
    result = cli_runner.invoke(cli, [command, "--help"])
    assert result.exit_code == 0, f"{command} --help failed: {result.output}"


@pytest.mark.parametrize(
    "path",
    [["parse"], ["add"], ["multiply"], ["factorial"], ["power"], ["scale"], ["scale", "up"]],
)
def test_examples_flag(cli_runner: CliRunner, path: list[str]) -> None:
    result = cli_runner.invoke(cli, [*path, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "digitlist" in result.output


def test_all_commands_in_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    for name in EXPECTED_GROUPS + EXPECTED_COMMANDS:
        assert name in result.output, f"{name} missing from --help"
