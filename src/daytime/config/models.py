"""Pydantic models for the sections of daytime.toml / ``[tool.daytime]``.

Defaults are baked here; a config file only carries overrides.
"""

from __future__ import annotations

from pydantic import BaseModel

from daytime.domain.anchoring import Rollover


class AnchorConfig(BaseModel):
    """[anchor] section: how rollover to the adjacent day is computed."""

    model_config = {"frozen": True}

    rollover: Rollover = Rollover.FIXED


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    json_indent: int = 2
