"""The DayTime value — construction, parsing, and canonical rendering.

Canonical form is ``HH:MM`` or ``HH:MM:SS`` with two-digit zero-padded
components.  Rendering drops a zero second, so ``01:02:00`` and ``01:02``
are the same value on output.

INVARIANT: 0 <= hour <= 23, 0 <= minute <= 59, 0 <= second <= 59.
Fields are never changed piecewise; decode adapters replace the whole
triple through :meth:`DayTime._assign` only after a successful parse.
"""

from __future__ import annotations

import re
from datetime import time
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from daytime.domain.errors import DayTimeError, ErrorKind

DEFAULT_TIME = "00:00"

DAYTIME_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{2}:[0-9]{2}(:[0-9]{2})?")

_TRIM_CHARS = " \t"

_FIELDS: tuple[tuple[str, int], ...] = (
    ("hour", 23),
    ("minute", 59),
    ("second", 59),
)


def _validate(hour: int, minute: int, second: int) -> None:
    for (name, upper), value in zip(_FIELDS, (hour, minute, second), strict=True):
        if value < 0 or value > upper:
            raise DayTimeError(ErrorKind.INVALID, f"value of {name} is {value}")


class DayTime:
    """A time of day without date or timezone.

    ``DayTime()`` is midnight.  Construction validates the fields in the
    order hour, minute, second and reports only the first failure.
    """

    __slots__ = ("_hour", "_minute", "_second")

    def __init__(self, hour: int = 0, minute: int = 0, second: int = 0) -> None:
        _validate(hour, minute, second)
        self._hour = hour
        self._minute = minute
        self._second = second

    @property
    def hour(self) -> int:
        return self._hour

    @property
    def minute(self) -> int:
        return self._minute

    @property
    def second(self) -> int:
        return self._second

    @classmethod
    def parse(cls, text: str) -> DayTime:
        """Alias for :func:`parse`."""
        return parse(text)

    @classmethod
    def from_time(cls, value: time) -> DayTime:
        """Build from a :class:`datetime.time`, dropping microseconds and tzinfo."""
        return cls(value.hour, value.minute, value.second)

    def to_time(self) -> time:
        """Return the equivalent naive :class:`datetime.time`."""
        return time(self._hour, self._minute, self._second)

    def _assign(self, other: DayTime) -> None:
        """Overwrite the whole triple from an already validated value."""
        self._hour, self._minute, self._second = other._hour, other._minute, other._second

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayTime):
            return NotImplemented
        return (self._hour, self._minute, self._second) == (
            other._hour,
            other._minute,
            other._second,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"DayTime(hour={self._hour}, minute={self._minute}, second={self._second})"

    def __str__(self) -> str:
        return format_daytime(self)

    # --- pydantic integration ---

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(format_daytime),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": f"^{DAYTIME_PATTERN.pattern}$"}


def new(hour: int, minute: int, second: int) -> DayTime:
    """Create a validated DayTime.

    Raises:
        DayTimeError: ``INVALID`` naming the first out-of-range field.
    """
    return DayTime(hour, minute, second)


def parse(text: str) -> DayTime:
    """Parse ``HH:MM`` or ``HH:MM:SS`` into a DayTime.

    Only spaces and tabs are trimmed from both ends.  Components must be
    exactly two ASCII digits; range checks are those of :func:`new`.

    Raises:
        DayTimeError: ``INVALID`` for a malformed shape or out-of-range field.
    """
    text = text.strip(_TRIM_CHARS)
    if DAYTIME_PATTERN.fullmatch(text) is None:
        raise DayTimeError(ErrorKind.INVALID, f"value '{text}'")

    parts = text.split(":")
    fields = [0, 0, 0]
    for index, raw in enumerate(parts):
        name = _FIELDS[index][0]
        try:
            fields[index] = int(raw)
        except ValueError as exc:
            raise DayTimeError(ErrorKind.INVALID, name) from exc

    return new(*fields)


def format_daytime(value: DayTime | None) -> str:
    """Render the canonical form; ``None`` renders as ``"00:00"``."""
    if value is None:
        return DEFAULT_TIME
    text = f"{value.hour:02d}:{value.minute:02d}"
    if value.second == 0:
        return text
    return f"{text}:{value.second:02d}"


def _coerce(value: Any) -> DayTime:
    match value:
        case DayTime():
            return value
        case str():
            return parse(value)
        case bytes() | bytearray():
            return parse(bytes(value).decode("utf-8"))
        case _:
            raise DayTimeError(ErrorKind.UNEXPECTED, f"type of value '{type(value).__name__}'")
