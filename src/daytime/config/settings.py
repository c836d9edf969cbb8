"""Unified settings — CLI flags, env vars, and config file in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click (``--rollover`` included)
  2. Env vars     — ``DAYTIME_*`` prefix, ``__`` for nested sections
  3. Config file  — ``daytime.toml`` or ``[tool.daytime]`` in pyproject.toml
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from daytime.config.discovery import find_config, read_config_table
from daytime.config.models import AnchorConfig, OutputConfig
from daytime.domain.anchoring import Rollover


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by the discovered config file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path is not None:
            try:
                self._data = read_config_table(toml_path)
            except tomllib.TOMLDecodeError as exc:
                raise click.ClickException(f"Invalid TOML in {toml_path}: {exc}") from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# Config path handed to settings_customise_sources during construction.
_tls = threading.local()


class DayTimeSettings(BaseSettings):
    """Settings for the daytime CLI and service layer.

    Attributes:
        config_path: The file the settings were read from, if any.
        anchor: Rollover rule applied by the ``anchor`` operation.
        output: Rendering options for ``--json`` output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DAYTIME_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    anchor: AnchorConfig = Field(default_factory=AnchorConfig)
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
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        rollover: Rollover | str | None = None,
        **cli_flags: Any,
    ) -> DayTimeSettings:
        """Construct settings from CLI invocation.

        An explicit *config_path* must exist; otherwise the config file is
        discovered from *start*.  A *rollover* overrides ``[anchor]``.

        Raises:
            click.BadParameter: *config_path* does not name a file.
        """
        if config_path:
            toml_path: Path | None = Path(config_path)
            if not toml_path.is_file():
                raise click.BadParameter(
                    f"config file {config_path!r} does not exist",
                    param_hint="'-c' / '--config'",
                )
        else:
            toml_path = find_config(start)

        if rollover is not None:
            cli_flags["anchor"] = AnchorConfig(rollover=Rollover(rollover))

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
