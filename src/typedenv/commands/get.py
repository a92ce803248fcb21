"""Command: read one environment variable as a typed value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typedenv.commands._base import TYPE_OPTION_HELP, TypedEnvCommand

if TYPE_CHECKING:
    from typedenv.commands._context import AppContext


@click.command(
    cls=TypedEnvCommand,
    examples="""\
  typedenv get PORT --type uint16
  typedenv get HOSTS --type "list[str]"
  typedenv get LIMITS --type "dict[str,int]" --default "cpu:2,mem:512"
  typedenv -q get DEBUG --type bool --default false""",
)
@click.argument("name")
@click.option("-t", "--type", "type_expr", default="str", show_default=True, help=TYPE_OPTION_HELP)
@click.option(
    "--default",
    "default",
    default=None,
    help="Raw value to use when NAME is unset. A set but invalid value still fails.",
)
@click.pass_obj
def get(app: AppContext, name: str, type_expr: str, default: str | None) -> None:
    """Read NAME from the environment and convert it to a type."""
    from typedenv.services.variables import VariableService

    app.emit(VariableService(app.environment).get(name, type_expr, default=default))
