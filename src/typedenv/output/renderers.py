"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from typedenv.output.console import create_console, get_output, style_for_status

if TYPE_CHECKING:
    from rich.console import Console

    from typedenv.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode.

    ``get`` and ``parse`` print only the canonical encoding so the output
    can be captured in a shell variable.
    """
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    if "encoded" in result.data:
        return str(result.data["encoded"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="env.ok")
    op = Text(f"  {result.op}", style="env.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="env.key")
    if key == "name":
        v = Text(str(value), style="env.name")
    elif key == "type":
        v = Text(str(value), style="env.type")
    else:
        v = Text(str(value))
    console.print(Text.assemble(k, v))


def _items_table(items: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("NAME", style="env.name")
    table.add_column("TYPE", style="env.type")
    table.add_column("STATUS")
    table.add_column("RAW", overflow="fold")
    for item in items:
        status = item["status"]
        raw = item.get("raw")
        table.add_row(
            Text(item["name"]),
            Text(item["type"]),
            Text(status, style=style_for_status(status)),
            Text("" if raw is None else repr(raw)),
        )
    return table


# ── Op renderers ──────────────────────────────────────────────────────


def _render_value(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """get / parse: the decoded value plus its canonical encoding."""
    _status_line(console, result)
    data = result.data
    for key in ("name", "type", "source"):
        if key in data:
            _field(console, key, data[key])
    _field(console, "value", data.get("value"))
    if verbose:
        _field(console, "raw", repr(data.get("raw")))
        _field(console, "encoded", repr(data.get("encoded")))


def _render_check(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_items_table(items))


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    error = result.error
    label = Text("ERROR", style="env.error")
    op = Text(f"  {result.op}", style="env.op")
    msg = error.message if error else "Unknown error"
    console.print(label, op, Text(f" — {msg}"), end="")
    console.print()
    if error is None:
        return
    items = error.detail.get("items")
    if items:
        console.print(_items_table(items))
    elif verbose:
        for key, value in error.detail.items():
            _field(console, key, value)


_Renderer = Callable[..., None]

_OP_RENDERERS: dict[str, _Renderer] = {
    "get": _render_value,
    "parse": _render_value,
    "check": _render_check,
}
