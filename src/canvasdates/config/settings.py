"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars with the ``CANVASDATES_`` prefix, ``__`` for nested sections
  3. TOML file, ``canvasdates.toml`` discovered via walk-up
  4. Code defaults baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from canvasdates.config.discovery import find_config
from canvasdates.config.models import ArchiveConfig, DatesConfig


def load_toml(path: Path) -> dict[str, Any]:
    """Parse a config file, reporting syntax errors as a CLI error."""
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by one ``canvasdates.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data = load_toml(toml_path) if toml_path and toml_path.is_file() else {}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic calls settings_customise_sources as a classmethod during
# __init__, so the discovered path travels on a thread-local.
_tls = threading.local()


def _resolve_config_path(config_path: str | None, search_from: Path | None) -> Path | None:
    """An explicit ``--config`` must exist; otherwise discover by walking up."""
    if not config_path:
        return find_config(search_from)
    path = Path(config_path)
    if not path.is_file():
        msg = f"Config file not found: {path}"
        raise click.ClickException(msg)
    return path


class CanvasDatesSettings(BaseSettings):
    """Settings for one canvasdates invocation, frozen after construction.

    Stored on the :class:`~canvasdates.commands._context.AppContext` at the
    CLI root and read by every command.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "CANVASDATES_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Global CLI flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # TOML sections
    dates: DatesConfig = Field(default_factory=DatesConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        toml = TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None))
        return init_settings, env_settings, toml

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_from: Path | None = None,
        **cli_flags: Any,
    ) -> CanvasDatesSettings:
        """Build settings for a CLI invocation.

        *search_from* defaults to the working directory.
        """
        _tls.toml_path = _resolve_config_path(config_path, search_from)
        try:
            return cls(config_path=_tls.toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
