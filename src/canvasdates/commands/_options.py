"""Shared Click options: the start date and start index every command takes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from canvasdates.domain.calendar import CalendarDate, parse_start_date


class StartDateType(click.ParamType):
    """``MM/DD/YYYY`` converted to a CalendarDate."""

    name = "MM/DD/YYYY"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> CalendarDate:
        if isinstance(value, CalendarDate):
            return value
        try:
            return parse_start_date(str(value))
        except ValueError:
            self.fail(f"Invalid start date {value!r}. Please use MM/DD/YYYY.", param, ctx)


START_DATE = StartDateType()


def start_date_option[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """``-start/--start MM/DD/YYYY`` (required)."""
    return click.option(
        "-start",
        "--start",
        "start_date",
        type=START_DATE,
        required=True,
        help="School-year start date, MM/DD/YYYY.",
    )(func)


def start_index_option[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """``-i/--index N``; falls back to ``dates.start_index`` from config."""
    return click.option(
        "-i",
        "--index",
        "start_index",
        type=int,
        default=None,
        help="Day number of the start date (0 or 1 by convention). [default: from config, 0]",
    )(func)


def dry_run_option[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    return click.option(
        "--dry-run",
        is_flag=True,
        help="Scan and report without writing anything.",
    )(func)
