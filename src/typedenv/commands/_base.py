"""Click classes shared by every typedenv command.

Each command can carry a block of ready-to-paste invocations. They are
printed by ``--examples`` rather than folded into ``--help``, since type
expressions such as ``"dict[str,int]"`` need shell quoting that is easier
to copy than to describe.
"""

from __future__ import annotations

from typing import Any

import click

TYPE_OPTION_HELP = (
    "Type expression: str, char, bool, int, int8..int64, uint8..uint64, float, "
    "float32, decimal, bytes, url, uuid, path, list[T], set[T], dict[K,V]."
)


def _examples_option(examples: str) -> click.Option:
    """Build the eager ``--examples`` flag that prints *examples* and exits."""

    def print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return click.Option(
        ["--examples"],
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=print_examples,
        help="Show usage examples.",
    )


class _ExamplesMixin:
    """Accept an ``examples=`` keyword and expose it as ``--examples``."""

    params: list[click.Parameter]

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(_examples_option(examples))


class TypedEnvCommand(_ExamplesMixin, click.Command):
    """A command with optional ``--examples``."""


class TypedEnvGroup(_ExamplesMixin, click.Group):
    """The root group; subcommands default to :class:`TypedEnvCommand`."""

    command_class = TypedEnvCommand
