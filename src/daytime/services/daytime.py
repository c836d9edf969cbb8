"""DayTimeService — parse, anchor, encode, and decode as ServiceResults.

Domain errors never escape this layer: a :class:`DayTimeError` becomes a
failed ServiceResult whose error code is the kind name (``INVALID``,
``OBJ_IS_NIL``, ``UNEXPECTED``).

Successful results may carry warnings:

- ``parse``: the input is not already in canonical form (``07:05:00``
  is stored as ``07:05``).
- ``anchor``: the resolved wall-clock time differs from the requested
  one because the UTC offset changes on that day.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from daytime.domain.anchoring import at_today, in_the_near_future, in_the_recent_past
from daytime.domain.daytime import DayTime, format_daytime, parse
from daytime.domain.errors import DayTimeError, ErrorKind
from daytime.infrastructure import codecs
from daytime.infrastructure.database import types as driver
from daytime.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from daytime.config.settings import DayTimeSettings

logger = logging.getLogger(__name__)


class AnchorMode(StrEnum):
    """Which occurrence of a DayTime to resolve."""

    TODAY = "today"
    FUTURE = "future"
    PAST = "past"


class Format(StrEnum):
    """Serialization adapters reachable from the service layer."""

    BINARY = "binary"
    TEXT = "text"
    JSON = "json"
    CSV = "csv"
    DRIVER = "driver"


# Binary payloads travel as hex so they survive a text channel.
_ENCODERS: dict[Format, Callable[[DayTime | None], str]] = {
    Format.BINARY: lambda v: codecs.marshal_binary(v).hex(),
    Format.TEXT: codecs.marshal_text,
    Format.JSON: codecs.marshal_json,
    Format.CSV: codecs.marshal_csv,
    Format.DRIVER: driver.value,
}

_DECODERS: dict[Format, Callable[[DayTime | None, str], None]] = {
    Format.BINARY: lambda t, p: codecs.unmarshal_binary(t, _from_hex(p)),
    Format.TEXT: codecs.unmarshal_text,
    Format.JSON: codecs.unmarshal_json,
    Format.CSV: codecs.unmarshal_csv,
    Format.DRIVER: driver.scan,
}


def _from_hex(payload: str) -> bytes:
    try:
        return bytes.fromhex(payload)
    except ValueError as exc:
        raise DayTimeError(ErrorKind.INVALID, "parse", f"hex payload '{payload}'") from exc


def _describe(value: DayTime) -> dict[str, Any]:
    return {
        "value": format_daytime(value),
        "hour": value.hour,
        "minute": value.minute,
        "second": value.second,
    }


def _canonical_warnings(text: str, value: DayTime) -> list[str]:
    canonical = format_daytime(value)
    written = text.strip()
    if written == canonical:
        return []
    return [f"'{written}' is stored as '{canonical}'"]


def _wall_clock_warnings(value: DayTime, moment: datetime) -> list[str]:
    if moment.time() == value.to_time():
        return []
    return [
        f"wall-clock time on {moment.date().isoformat()} is "
        f"{format_daytime(DayTime.from_time(moment.time()))}, not {format_daytime(value)}, "
        "because the UTC offset changes that day"
    ]


class DayTimeService:
    """Operations over DayTime values driven by :class:`DayTimeSettings`."""

    def __init__(self, settings: DayTimeSettings) -> None:
        self._settings = settings

    def parse(self, text: str) -> ServiceResult:
        """Validate *text* and report its fields and canonical form."""
        op = "parse"
        try:
            value = parse(text)
        except DayTimeError as exc:
            logger.debug("Rejected input", extra={"op": op, "text": text, "kind": exc.kind})
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data=_describe(value),
            warnings=_canonical_warnings(text, value),
        )

    def anchor(
        self,
        text: str,
        mode: AnchorMode | str = AnchorMode.FUTURE,
        *,
        now: datetime | None = None,
    ) -> ServiceResult:
        """Resolve *text* to a datetime relative to *now* (default: the clock)."""
        op = "anchor"
        try:
            mode = AnchorMode(mode)
        except ValueError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="UNKNOWN_MODE", message=f"Unknown anchor mode: {mode!r}"),
            )
        try:
            value = parse(text)
        except DayTimeError as exc:
            return ServiceResult.failure(op, exc)

        rollover = self._settings.anchor.rollover
        if mode is AnchorMode.TODAY:
            moment = at_today(value, now=now)
        elif mode is AnchorMode.FUTURE:
            moment = in_the_near_future(value, now=now, rollover=rollover)
        else:
            moment = in_the_recent_past(value, now=now, rollover=rollover)

        logger.debug(
            "Anchored %s",
            mode,
            extra={"daytime": value, "moment": moment, "rollover": rollover},
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "value": format_daytime(value),
                "mode": str(mode),
                "datetime": moment.isoformat(),
            },
            warnings=_wall_clock_warnings(value, moment),
            meta={"rollover": str(rollover)},
        )

    def encode(self, text: str, fmt: Format | str = Format.TEXT) -> ServiceResult:
        """Parse *text* and render it through the *fmt* encoder."""
        op = "encode"
        fmt_result = self._resolve_format(op, fmt)
        if isinstance(fmt_result, ServiceResult):
            return fmt_result
        try:
            value = parse(text)
        except DayTimeError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"format": str(fmt_result), "payload": _ENCODERS[fmt_result](value)},
        )

    def decode(self, payload: str, fmt: Format | str = Format.TEXT) -> ServiceResult:
        """Load *payload* through the *fmt* decoder into a fresh DayTime."""
        op = "decode"
        fmt_result = self._resolve_format(op, fmt)
        if isinstance(fmt_result, ServiceResult):
            return fmt_result
        target = DayTime()
        try:
            _DECODERS[fmt_result](target, payload)
        except DayTimeError as exc:
            logger.debug(
                "Decode failed",
                extra={"op": op, "format": fmt_result, "payload": payload, "kind": exc.kind},
            )
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"format": str(fmt_result), **_describe(target)},
        )

    @staticmethod
    def _resolve_format(op: str, fmt: Format | str) -> Format | ServiceResult:
        try:
            return Format(fmt)
        except ValueError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="UNKNOWN_FORMAT", message=f"Unknown format: {fmt!r}"),
            )
