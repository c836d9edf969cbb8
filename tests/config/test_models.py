"""Tests for the configuration section models."""

import pytest
from pydantic import ValidationError

from daytime.config.models import AnchorConfig, OutputConfig
from daytime.domain.anchoring import Rollover


class TestAnchorConfig:
    def test_default_is_fixed(self) -> None:
        assert AnchorConfig().rollover is Rollover.FIXED

    def test_accepts_string(self) -> None:
        assert AnchorConfig(rollover="calendar").rollover is Rollover.CALENDAR

    def test_rejects_unknown(self) -> None:
        with pytest.raises(ValidationError):
            AnchorConfig(rollover="weekly")

    def test_frozen(self) -> None:
        config = AnchorConfig()
        with pytest.raises(ValidationError):
            config.rollover = Rollover.CALENDAR  # type: ignore[misc]


class TestOutputConfig:
    def test_default_indent(self) -> None:
        assert OutputConfig().json_indent == 2

    def test_rejects_non_integer(self) -> None:
        with pytest.raises(ValidationError):
            OutputConfig(json_indent="wide")
