"""Config file discovery and reading.

Walk-up finder locates digitlist.toml, similar to how git finds .git/.
Supports DIGITLIST_CONFIG env var and --config CLI flag overrides.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from digitlist.config.models import DigitConfig

CONFIG_FILENAME = "digitlist.toml"
CONFIG_ENV_VAR = "DIGITLIST_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for digitlist.toml.

    Returns the path to the config file, or None if not found.
    Checks DIGITLIST_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* and check it against :class:`DigitConfig`.

    Returns the sparse sections exactly as written so that env vars can
    still override individual keys.  Syntax and value errors both raise
    ``click.ClickException`` naming the file.
    """
    try:
        data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc

    try:
        DigitConfig.model_validate(data)
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        raise click.ClickException(f"Invalid config in {path}: {problems}") from exc
    return data
