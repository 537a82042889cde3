"""Command: rewrite dates in an already extracted package, in place."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from canvasdates.commands._base import CdCommand
from canvasdates.commands._options import dry_run_option, start_date_option, start_index_option

if TYPE_CHECKING:
    from canvasdates.commands._context import AppContext
    from canvasdates.domain.calendar import CalendarDate


@click.command(
    cls=CdCommand,
    examples="""\
  canvasdates apply unzipped_archive -start 08/26/2024
  canvasdates apply wiki_content/week-01.html -start 08/26/2024 -i 1
  canvasdates -v apply course/ -start 08/26/2024 --dry-run""",
)
@click.argument("path", type=click.Path(path_type=Path))
@start_date_option
@start_index_option
@dry_run_option
@click.pass_obj
def apply(
    app: AppContext,
    path: Path,
    start_date: CalendarDate,
    start_index: int | None,
    dry_run: bool,
) -> None:
    """Rewrite DateReplace directives under PATH (a directory or one file)."""
    from canvasdates.services.rewrite import RewriteService

    svc = RewriteService(app.settings)
    if path.is_file():
        app.emit(svc.rewrite_file(path, start_date, start_index, dry_run=dry_run))
    else:
        app.emit(svc.rewrite_tree(path, start_date, start_index, dry_run=dry_run))
