"""Output mode dispatch for ServiceResult.

Three modes: JSON (``--json``) for machines, quiet (``-q``) for scripts,
and Rich-rendered text for humans (the default).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from canvasdates.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from canvasdates.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags copied from the CLI settings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display. JSON wins over quiet."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
