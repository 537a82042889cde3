"""Subcommand modules for canvasdates.

Provides register_commands() which uses deferred imports to keep
``canvasdates --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from canvasdates.commands.apply import apply
    from canvasdates.commands.render import render
    from canvasdates.commands.scan import scan
    from canvasdates.commands.update import update

    cli.add_command(update)
    cli.add_command(apply)
    cli.add_command(scan)
    cli.add_command(render)
