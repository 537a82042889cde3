"""Command: rewrite the dates inside a course archive."""

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
  canvasdates update course.imscc -start 08/26/2024
  canvasdates update course.imscc -start 01/15/2024 -i 1 -o spring.imscc
  canvasdates update course.imscc -start 08/26/2024 --dry-run""",
)
@click.argument("archive", type=click.Path(dir_okay=False, path_type=Path))
@start_date_option
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output archive. [default: <input>_updated.<ext>]",
)
@start_index_option
@dry_run_option
@click.pass_obj
def update(
    app: AppContext,
    archive: Path,
    start_date: CalendarDate,
    output: Path | None,
    start_index: int | None,
    dry_run: bool,
) -> None:
    """Unpack ARCHIVE, rewrite every DateReplace directive, and repack it."""
    from canvasdates.services.archive import ArchiveService

    svc = ArchiveService(app.settings)
    app.emit(
        svc.update_archive(archive, start_date, start_index, output=output, dry_run=dry_run)
    )
