"""Rich Console factory and theme for daytime output.

Consoles render into a StringIO buffer so renderers return plain strings;
Rich drops color codes when the output is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

DAYTIME_THEME = Theme(
    {
        "dt.ok": "bold green",
        "dt.error": "bold red",
        "dt.op": "bold cyan",
        "dt.key": "dim",
        "dt.value": "bold blue",
        "dt.datetime": "bold",
        "dt.payload": "yellow",
        "dt.context": "dim red",
        "dt.mode.today": "green",
        "dt.mode.future": "cyan",
        "dt.mode.past": "magenta",
    }
)

_KEY_STYLES = {
    "value": "dt.value",
    "datetime": "dt.datetime",
    "payload": "dt.payload",
}


def field_style(key: str, value: object) -> str:
    """Theme style for one ServiceResult data field (``""`` for none)."""
    if key == "mode":
        style = f"dt.mode.{value}"
        return style if style in DAYTIME_THEME.styles else ""
    return _KEY_STYLES.get(key, "")


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=DAYTIME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
