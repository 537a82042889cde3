"""Tests for canvasdates.toml walk-up discovery."""

from pathlib import Path

import pytest

from canvasdates.config.discovery import CONFIG_ENV_VAR, find_config


class TestFindConfig:
    def test_in_start_directory(self, tmp_path: Path) -> None:
        config = tmp_path / "canvasdates.toml"
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / "canvasdates.toml"
        config.write_text("")
        deep = tmp_path / "a" / "b" / "c"
        deep.mkdir(parents=True)
        assert find_config(deep) == config.resolve()

    def test_hidden_variant(self, tmp_path: Path) -> None:
        config = tmp_path / ".canvasdates.toml"
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_plain_name_preferred(self, tmp_path: Path) -> None:
        (tmp_path / ".canvasdates.toml").write_text("")
        plain = tmp_path / "canvasdates.toml"
        plain.write_text("")
        assert find_config(tmp_path) == plain.resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("")
        inner = tmp_path / "course"
        inner.mkdir()
        (inner / "canvasdates.toml").write_text("")
        assert find_config(inner) == (inner / "canvasdates.toml").resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "canvasdates.toml").write_text("")
        assert find_config() == (tmp_path / "canvasdates.toml").resolve()

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "elsewhere.toml"
        config.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config))
        assert find_config(tmp_path / "ignored") == config

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "canvasdates.toml").write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None
