"""Click building blocks shared by the daytime commands.

``DayTimeCommand`` adds an eager ``--examples`` flag: each example is an
argument line plus a one-line explanation, printed under the command path
actually invoked.  ``MOMENT`` parses the ``--now`` reference moment.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

import click

Example = tuple[str, str]


class MomentType(click.ParamType):
    """ISO 8601 datetime; without an offset it is local wall-clock time."""

    name = "moment"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> datetime:
        if isinstance(value, datetime):
            return value
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            self.fail(f"{value!r} is not an ISO 8601 datetime", param, ctx)


MOMENT = MomentType()


def _add_examples_option(cmd: click.Command, examples: Sequence[Example]) -> None:
    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        for args, explanation in examples:
            click.echo(f"  {ctx.command_path} {args}")
            click.echo(f"      {explanation}")
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DayTimeCommand(click.Command):
    """Click Command with an ``--examples`` flag built from *examples*."""

    def __init__(self, *args: Any, examples: Sequence[Example] = (), **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = tuple(examples)
        if self.examples:
            _add_examples_option(self, self.examples)
