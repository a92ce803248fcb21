"""Root CLI group for typedenv with global flags and command registration."""

from __future__ import annotations

import click

from typedenv import __version__
from typedenv.commands import register_commands
from typedenv.commands._base import TypedEnvGroup
from typedenv.commands._context import AppContext
from typedenv.config.settings import TypedEnvSettings


@click.group(
    cls=TypedEnvGroup,
    invoke_without_command=True,
    examples="""\
  typedenv get PORT --type int
  typedenv parse "one:1,two:2" --type "dict[str,int]"
  typedenv check PORT=uint16 DEBUG=bool""",
)
@click.version_option(version=__version__, prog_name="typedenv")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
) -> None:
    """typedenv — typed access to environment variables."""
    settings = TypedEnvSettings.from_cli(
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
