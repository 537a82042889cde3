"""Click base classes with an ``--examples`` flag.

Every canvasdates command takes an ``examples=`` block of sample
invocations. ``--help`` stays short; ``--examples`` prints the block and
exits before any argument is validated, so required options such as
``-start`` need not be supplied.
"""

from __future__ import annotations

from typing import Any

import click


class _ExamplesMixin:
    """Appends an eager ``--examples`` option when sample text is given."""

    examples: str | None

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(  # type: ignore[attr-defined]
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._print_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _print_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(self.examples)
        ctx.exit(0)


class CdCommand(_ExamplesMixin, click.Command):
    """A click Command accepting ``examples=``."""


class CdGroup(_ExamplesMixin, click.Group):
    """A click Group accepting ``examples=``.

    Subcommands declared through the group default to :class:`CdCommand`.
    """

    command_class = CdCommand
