"""Command: preview what a single directive resolves to."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from canvasdates.commands._base import CdCommand
from canvasdates.commands._options import start_date_option, start_index_option

if TYPE_CHECKING:
    from canvasdates.commands._context import AppContext
    from canvasdates.domain.calendar import CalendarDate


@click.command(
    cls=CdCommand,
    examples="""\
  canvasdates render "MM DD, YYYY, 5" -start 01/15/2024 -i 1
  canvasdates render "N M D, 12" -start 08/26/2024
  canvasdates -q render Y -start 08/26/2024""",
)
@click.argument("args")
@start_date_option
@start_index_option
@click.pass_obj
def render(
    app: AppContext,
    args: str,
    start_date: CalendarDate,
    start_index: int | None,
) -> None:
    """Render ARGS, the text inside DateReplace(...), against a start date."""
    from canvasdates.services.rewrite import RewriteService

    app.emit(RewriteService(app.settings).render(args, start_date, start_index))
