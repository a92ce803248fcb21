"""Command: validate several environment variables at once."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from typedenv.commands._base import TypedEnvCommand

if TYPE_CHECKING:
    from typedenv.commands._context import AppContext


def _parse_specs(
    _ctx: click.Context, _param: click.Parameter, value: tuple[str, ...]
) -> list[tuple[str, str]]:
    """Split ``NAME=TYPE`` arguments; a bare ``NAME`` means ``str``."""
    specs: list[tuple[str, str]] = []
    for spec in value:
        name, sep, type_expr = spec.partition("=")
        if not name or (sep and not type_expr):
            msg = f"Expected NAME or NAME=TYPE, got {spec!r}"
            raise click.BadParameter(msg)
        specs.append((name, type_expr if sep else "str"))
    return specs


@click.command(
    cls=TypedEnvCommand,
    examples="""\
  typedenv check PORT=uint16 DEBUG=bool
  typedenv check --require DATABASE_URL=url WORKERS=int
  typedenv --json check 'ALLOWED_HOSTS=list[str]'""",
)
@click.argument("specs", nargs=-1, required=True, callback=_parse_specs)
@click.option("--require", is_flag=True, help="Fail when a variable is unset.")
@click.pass_obj
def check(app: AppContext, specs: list[tuple[str, str]], require: bool) -> None:
    """Check that each NAME=TYPE variable parses as its type."""
    from typedenv.services.variables import VariableService

    app.emit(VariableService(app.environment).check(specs, require=require))
