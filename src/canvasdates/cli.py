"""Root CLI group for canvasdates with global flags and command registration."""

from __future__ import annotations

import click

from canvasdates import __version__
from canvasdates.commands import register_commands
from canvasdates.commands._base import CdGroup
from canvasdates.commands._context import AppContext
from canvasdates.config.settings import CanvasDatesSettings


@click.group(
    cls=CdGroup,
    invoke_without_command=True,
    examples="""\
  canvasdates update course.imscc -start 08/26/2024
  canvasdates scan unzipped_archive
  canvasdates render "MM DD, YYYY, 5" -start 01/15/2024 -i 1""",
)
@click.version_option(version=__version__, prog_name="canvasdates")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """canvasdates: rewrite DateReplace dates in course packages."""
    settings = CanvasDatesSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main(args: list[str] | None = None) -> None:
    """Console-script entry point.

    Click reports usage errors with exit status 2; canvasdates reports every
    argument error with status 1, like any other failure.
    """
    try:
        status = cli.main(args=args, prog_name="canvasdates", standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        raise SystemExit(1) from exc
    except click.Abort as exc:
        click.echo("Aborted!", err=True)
        raise SystemExit(1) from exc
    raise SystemExit(status if isinstance(status, int) else 0)
