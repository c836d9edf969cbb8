"""Command: validate a time of day and show its canonical form."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daytime.commands._base import DayTimeCommand

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


@click.command(
    cls=DayTimeCommand,
    examples=(
        ("07:30", "hour and minute"),
        ("23:59:59", "with seconds"),
        ("08:00:00", "zero seconds are dropped: prints 08:00 with a warning"),
    ),
)
@click.argument("value")
@click.pass_obj
def parse(app: AppContext, value: str) -> None:
    """Parse VALUE (HH:MM or HH:MM:SS) and print its fields."""
    app.emit(app.service.parse(value))
