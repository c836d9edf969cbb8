"""Command: resolve a time of day to a concrete local datetime."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

import click

from daytime.commands._base import MOMENT, DayTimeCommand
from daytime.services.daytime import AnchorMode

if TYPE_CHECKING:
    from daytime.commands._context import AppContext


@click.command(
    cls=DayTimeCommand,
    examples=(
        ("09:00", "next 09:00 from now"),
        ("09:00 --mode past", "latest 09:00 up to now"),
        ("00:00 --mode today", "midnight at the start of today"),
        ("22:00 --now 2024-03-30T23:00:00", "next 22:00 after a fixed local moment"),
    ),
)
@click.argument("value")
@click.option(
    "--mode",
    type=click.Choice([m.value for m in AnchorMode]),
    default=AnchorMode.FUTURE.value,
    show_default=True,
    help="today: current date; future: next occurrence; past: latest occurrence.",
)
@click.option(
    "--now",
    type=MOMENT,
    default=None,
    help="Reference moment (ISO 8601) instead of the clock; no offset means local time.",
)
@click.pass_obj
def anchor(app: AppContext, value: str, mode: str, now: datetime | None) -> None:
    """Anchor VALUE to today, its next occurrence, or its latest occurrence."""
    app.emit(app.service.anchor(value, mode, now=now))
