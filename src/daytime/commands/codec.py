"""Commands: encode and decode a time of day through a serialization adapter."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from daytime.commands._base import DayTimeCommand
from daytime.services.daytime import Format

if TYPE_CHECKING:
    from daytime.commands._context import AppContext

_FORMAT_CHOICE = click.Choice([f.value for f in Format])


@click.command(
    cls=DayTimeCommand,
    examples=(
        ("01:02:03 --format json", "quoted JSON string"),
        ("01:02 --format binary", "UTF-8 bytes of the canonical form, as hex"),
    ),
)
@click.argument("value")
@click.option("--format", "fmt", type=_FORMAT_CHOICE, default="text", show_default=True)
@click.pass_obj
def encode(app: AppContext, value: str, fmt: str) -> None:
    """Encode VALUE with the chosen adapter (binary payloads print as hex)."""
    app.emit(app.service.encode(value, fmt))


@click.command(
    cls=DayTimeCommand,
    examples=(
        ("'\"01:02:03\"' --format json", "JSON string literal"),
        ("30313a3032 --format binary", "hex of the bytes 01:02"),
    ),
)
@click.argument("payload")
@click.option("--format", "fmt", type=_FORMAT_CHOICE, default="text", show_default=True)
@click.pass_obj
def decode(app: AppContext, payload: str, fmt: str) -> None:
    """Decode PAYLOAD with the chosen adapter (binary payloads are hex)."""
    app.emit(app.service.decode(payload, fmt))
