"""AppContext: the object every subcommand receives through ``@click.pass_obj``.

The root group builds it once per invocation. Building it configures
logging; ``emit`` turns a ServiceResult into output and an exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from canvasdates.config.logging import configure_logging
from canvasdates.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from canvasdates.config.settings import CanvasDatesSettings
    from canvasdates.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: CanvasDatesSettings) -> None:
        self.settings = settings
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        # In JSON mode, warnings are already in the serialized payload.
        if not settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
