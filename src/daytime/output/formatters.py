"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json).  The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from daytime.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from daytime.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output mode switches resolved from the CLI flags."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    json_indent: int = 2


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet, quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=settings.json_indent or None)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose)
