"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, canvasdates.toml only contains
overrides. An empty file (or none at all) reproduces the classic behaviour.
"""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from canvasdates.domain.directives import MARKER
from canvasdates.infrastructure.archive import DEFAULT_OUTPUT_SUFFIX
from canvasdates.infrastructure.filesystem import DEFAULT_EXTENSIONS


class DatesConfig(BaseModel):
    """[dates] section."""

    model_config = {"frozen": True}

    start_index: int = 0
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    marker: str = MARKER
    encoding: str = "utf-8"

    @field_validator("extensions")
    @classmethod
    def _dotted(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Accept ``html`` as well as ``.html``."""
        return tuple(ext if ext.startswith(".") else f".{ext}" for ext in value)

    @field_validator("marker")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        if not value:
            msg = "marker must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("encoding")
    @classmethod
    def _known_codec(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            msg = f"unknown encoding: {value}"
            raise ValueError(msg) from exc
        return value


class ArchiveConfig(BaseModel):
    """[archive] section."""

    model_config = {"frozen": True}

    unzip_command: str = "unzip"
    zip_command: str = "zip"
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX
    work_dir: str = "unzipped_archive"
    keep_work_dir: bool = False

    @field_validator("work_dir")
    @classmethod
    def _not_cwd(cls, value: str) -> str:
        if not value.strip() or Path(value) == Path("."):
            msg = "work_dir must name a directory other than the current one"
            raise ValueError(msg)
        return value


class CanvasDatesConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    dates: DatesConfig = Field(default_factory=DatesConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
