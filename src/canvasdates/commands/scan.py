"""Command: list directives without changing anything."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from canvasdates.commands._base import CdCommand
from canvasdates.commands._options import start_index_option

if TYPE_CHECKING:
    from canvasdates.commands._context import AppContext


@click.command(
    cls=CdCommand,
    examples="""\
  canvasdates scan unzipped_archive
  canvasdates --json scan wiki_content/syllabus.html
  canvasdates -q scan course/""",
)
@click.argument("path", type=click.Path(path_type=Path))
@start_index_option
@click.pass_obj
def scan(app: AppContext, path: Path, start_index: int | None) -> None:
    """Show every DateReplace directive under PATH and the span it targets."""
    from canvasdates.services.rewrite import RewriteService

    app.emit(RewriteService(app.settings).scan(path, start_index))
