"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from daytime.domain.errors import DayTimeError, ErrorKind
from daytime.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="parse", data={"value": "01:02"})
        assert result.ok is True
        assert result.op == "parse"
        assert result.data == {"value": "01:02"}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="INVALID", message="value '' : invalid")
        result = ServiceResult(ok=False, op="parse", error=error)
        assert result.error is not None
        assert result.error.code == "INVALID"
        assert result.error.kind is None
        assert result.error.context == []

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="anchor", data={"mode": "past"}, meta={"rollover": "fixed"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["mode"] == "past"
        assert parsed["meta"]["rollover"] == "fixed"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_failure_from_exception(self) -> None:
        exc = DayTimeError(ErrorKind.INVALID, "value of hour is 24").wrap("parse")
        result = ServiceResult.failure("decode", exc)
        assert result.ok is False
        assert result.op == "decode"
        assert result.warnings == []
        assert result.error == ServiceError(
            code="INVALID",
            message="parse: value of hour is 24: invalid",
            kind=ErrorKind.INVALID,
            context=["parse", "value of hour is 24"],
        )

    def test_error_kind_serializes_as_value(self) -> None:
        result = ServiceResult.failure("decode", DayTimeError(ErrorKind.OBJ_IS_NIL))
        parsed = json.loads(result.model_dump_json())
        assert parsed["error"]["code"] == "OBJ_IS_NIL"
        assert parsed["error"]["kind"] == "object is nil"
        assert parsed["error"]["context"] == []
