"""Tests for CanvasDatesSettings: unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from canvasdates.config.models import ArchiveConfig
from canvasdates.config.settings import CanvasDatesSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.dates.start_index == 0
        assert settings.dates.marker == "DateReplace("
        assert settings.archive.output_suffix == "_updated"
        assert settings.archive.keep_work_dir is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]

    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path, verbose=True, quiet=True)
        assert settings.verbose is True
        assert settings.quiet is True

    def test_section_override_kwarg(self, tmp_path: Path) -> None:
        settings = CanvasDatesSettings.from_cli(
            search_from=tmp_path, archive=ArchiveConfig(keep_work_dir=True)
        )
        assert settings.archive.keep_work_dir is True


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "canvasdates.toml"
        toml.write_text('[dates]\nstart_index = 1\n[archive]\noutput_suffix = "-fall"\n')
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        assert settings.config_path == toml.resolve()
        assert settings.dates.start_index == 1
        assert settings.archive.output_suffix == "-fall"
        assert settings.archive.zip_command == "zip"  # default preserved

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("[dates]\nstart_index = 1\n")
        nested = tmp_path / "exports" / "fall"
        nested.mkdir(parents=True)
        settings = CanvasDatesSettings.from_cli(search_from=nested)
        assert settings.dates.start_index == 1

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("")
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        assert settings.dates.start_index == 0

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "dates.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[dates]\nextensions = ["html"]\n')
        settings = CanvasDatesSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.config_path == custom
        assert settings.dates.extensions == (".html",)

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            CanvasDatesSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("[dates\nstart_index = ")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CanvasDatesSettings.from_cli(search_from=tmp_path)

    def test_cli_flags_beat_toml(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("verbose = false\n")
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path, verbose=True)
        assert settings.verbose is True


class TestEnvSource:
    def test_nested_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CANVASDATES_DATES__START_INDEX", "3")
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        assert settings.dates.start_index == 3

    def test_flag_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CANVASDATES_QUIET", "true")
        settings = CanvasDatesSettings.from_cli(search_from=tmp_path)
        assert settings.quiet is True
