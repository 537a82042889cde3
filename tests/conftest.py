"""Shared pytest fixtures and test helpers for canvasdates tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from canvasdates.config.settings import CanvasDatesSettings
from canvasdates.domain.calendar import CalendarDate

WEEK_ONE = (
    "<html><body>\r\n"
    '<p>Quiz: <span title="DateReplace(NN, MM DD, 1)">TBD</span></p>\r\n'
    '<p>Lab: <span title="DateReplace(M D, 3)">TBD</span></p>\r\n'
    "</body></html>\r\n"
)
SYLLABUS = '<syllabus><year title="DateReplace(Y)">1999</year></syllabus>\n'
BROKEN = '<p><span title="DateReplace(D, abc)">TBD</span></p>\n'
NOTES = "No directives in here.\n"


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from a temp CWD with no canvasdates env vars or log handlers leaking."""
    for key in list(os.environ):
        if key.startswith("CANVASDATES_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> CanvasDatesSettings:
    """Default settings (no config file)."""
    return CanvasDatesSettings.from_cli(search_from=tmp_path)


@pytest.fixture
def fall_start() -> CalendarDate:
    """Monday, August 26, 2024."""
    return CalendarDate(2024, 8, 26)


@pytest.fixture
def course_dir(tmp_path: Path) -> Path:
    """An extracted course package with directives, plain files, and a binary."""
    root = tmp_path / "course"
    (root / "wiki_content").mkdir(parents=True)
    (root / "course_settings").mkdir()
    (root / "web_resources").mkdir()

    (root / "wiki_content" / "week-01.html").write_bytes(WEEK_ONE.encode("utf-8"))
    (root / "wiki_content" / "broken.html").write_text(BROKEN, encoding="utf-8")
    (root / "wiki_content" / "notes.txt").write_text(NOTES, encoding="utf-8")
    (root / "course_settings" / "syllabus.xml").write_text(SYLLABUS, encoding="utf-8")
    (root / "web_resources" / "logo.png").write_bytes(
        b"\x89PNG\r\n" + b'DateReplace(Y)">x<' + b"\x00\xff"
    )
    return root
