"""Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.text import Text

from daytime.output.console import create_console, field_style, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from daytime.services.result import ServiceResult


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if result.ok:
        _render_ok(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode: the primary value only."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"
    for key in ("datetime", "payload", "value"):
        if key in result.data:
            return str(result.data[key])
    return f"OK: {result.op}"


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(
        Text.assemble((f"  {key}: ", "dt.key"), (str(value), field_style(key, value)))
    )


def _render_ok(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text("OK", style="dt.ok"), Text(f"  {result.op}", style="dt.op"), end="")
    console.print()
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose and result.meta:
        console.print(Text("  meta:", style="dim"))
        for k, v in result.meta.items():
            console.print(f"    {k}: {v}")


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="dt.error")
    op = Text(f"  {result.op}", style="dt.op")
    console.print(label, op, Text(" — "), msg)

    if verbose and err is not None:
        if err.kind is not None:
            console.print(Text.assemble(("  kind: ", "dt.key"), (str(err.kind), "dt.error")))
        if err.context:
            console.print(Text("  context:", style="dt.key"))
            for depth, frame in enumerate(err.context):
                console.print(Text(f"    {'  ' * depth}{frame}", style="dt.context"))
