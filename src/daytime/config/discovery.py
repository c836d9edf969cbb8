"""Config file discovery.

Walking up from the start directory, the first directory holding either
``daytime.toml`` or a ``pyproject.toml`` with a ``[tool.daytime]`` table
wins; ``daytime.toml`` is preferred within one directory.  The
``DAYTIME_CONFIG`` env var names a file directly and disables the walk.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "daytime.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "DAYTIME_CONFIG"

logger = logging.getLogger(__name__)


def read_config_table(path: Path) -> dict[str, Any]:
    """Return the daytime settings held by *path*.

    A ``pyproject.toml`` contributes its ``[tool.daytime]`` table; any other
    file is read whole.

    Raises:
        tomllib.TOMLDecodeError: *path* is not valid TOML.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        table: dict[str, Any] = data.get("tool", {}).get("daytime", {})
        return table
    return data


def _declares_daytime(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        logger.debug("Skipping unreadable %s during config discovery", pyproject)
        return False
    return "daytime" in data.get("tool", {})


def find_config(start: Path | None = None) -> Path | None:
    """Locate the config file for *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_daytime(pyproject):
            return pyproject
    return None
