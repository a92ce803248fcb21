"""Subcommand modules for typedenv.

Provides register_commands() which uses deferred imports to keep
``typedenv --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from typedenv.commands.check import check
    from typedenv.commands.get import get
    from typedenv.commands.parse import parse

    cli.add_command(get)
    cli.add_command(parse)
    cli.add_command(check)
