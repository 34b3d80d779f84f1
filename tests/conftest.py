"""Shared pytest fixtures and test helpers for digitlist tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from digitlist.config.settings import DigitSettings
from digitlist.services.arithmetic import ArithmeticService
from digitlist.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray digitlist.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test classes.
    """
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _clean_digitlist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    clear_digitlist_env(monkeypatch)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """Undo what AppContext does process-wide: logging handlers and telemetry."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg_level = logging.getLogger("digitlist").level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    logging.getLogger("digitlist").setLevel(pkg_level)
    disable_telemetry()


def clear_digitlist_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop every DIGITLIST_* variable so the developer's shell cannot steer a test."""
    for name in list(os.environ):
        if name.startswith("DIGITLIST_"):
            monkeypatch.delenv(name)


def make_settings(tmp_path: Path, **overrides: Any) -> DigitSettings:
    """Settings built from defaults only (no TOML discovered under *tmp_path*)."""
    return DigitSettings.from_cli(start_dir=tmp_path, **overrides)


@pytest.fixture
def settings(tmp_path: Path) -> DigitSettings:
    return make_settings(tmp_path)


@pytest.fixture
def service(settings: DigitSettings) -> ArithmeticService:
    return ArithmeticService(settings)
