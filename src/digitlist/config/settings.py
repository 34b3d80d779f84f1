"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DIGITLIST_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``digitlist.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

from contextvars import ContextVar
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from digitlist.config.discovery import find_config, read_config_file
from digitlist.config.models import ArithmeticConfig, LimitsConfig, OutputConfig

# The file chosen by from_cli(), visible to settings_customise_sources().
_config_file: ContextVar[Path | None] = ContextVar("_config_file", default=None)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feed the sections of one digitlist.toml into the settings merge."""

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None) -> None:
        super().__init__(settings_cls)
        self._sections = read_config_file(path) if path is not None else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, field_name in self._sections

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


class DigitSettings(BaseSettings):
    """Everything a command needs to know about how to run.

    Attributes:
        config_path: The TOML file actually read, or None when running on
            defaults and env vars only.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DIGITLIST_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # digitlist.toml sections
    arithmetic: ArithmeticConfig = Field(default_factory=ArithmeticConfig)
    limits: LimitsConfig = Field(default_factory=LimitsConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml_settings = TomlSettingsSource(settings_cls, _config_file.get())
        return init_settings, env_settings, toml_settings

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start_dir: Path | None = None,
        **cli_flags: Any,
    ) -> DigitSettings:
        """Build settings for one CLI invocation.

        An explicit *config_path* is read only if it exists; without one,
        ``digitlist.toml`` is searched for upward from *start_dir*.
        """
        if config_path:
            explicit = Path(config_path)
            path = explicit if explicit.is_file() else None
        else:
            path = find_config(start_dir)

        token = _config_file.set(path)
        try:
            return cls(config_path=path, **cli_flags)
        finally:
            _config_file.reset(token)
