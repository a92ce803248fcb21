"""Command: convert a literal value without touching the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typedenv.commands._base import TYPE_OPTION_HELP, TypedEnvCommand

if TYPE_CHECKING:
    from typedenv.commands._context import AppContext


@click.command(
    cls=TypedEnvCommand,
    examples="""\
  typedenv parse 1,1,2 --type "set[int]"
  typedenv parse +42 --type int8
  typedenv -q parse 0.1 --type float32""",
)
@click.argument("value")
@click.option("-t", "--type", "type_expr", default="str", show_default=True, help=TYPE_OPTION_HELP)
@click.pass_obj
def parse(app: AppContext, value: str, type_expr: str) -> None:
    """Convert VALUE to a type and show its canonical encoding."""
    from typedenv.services.variables import VariableService

    app.emit(VariableService(app.environment).parse(value, type_expr))
