"""Subcommand modules for daytime.

Provides register_commands() which uses deferred imports to keep
``daytime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from daytime.commands.anchor import anchor
    from daytime.commands.codec import decode, encode
    from daytime.commands.parse import parse

    cli.add_command(parse)
    cli.add_command(anchor)
    cli.add_command(encode)
    cli.add_command(decode)
