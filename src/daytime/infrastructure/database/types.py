"""Database driver adapter: canonical text out, text or bytes in.

:func:`value` and :func:`scan` are the driver-level pair.
:class:`DayTimeType` wires them into SQLAlchemy so a ``Column`` can hold
DayTime values directly; storage is a ``TEXT`` column in canonical form.
"""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from daytime.domain.daytime import DayTime, format_daytime
from daytime.domain.errors import DayTimeError, ErrorKind
from daytime.infrastructure.codecs import decode_into

logger = logging.getLogger(__name__)


def value(v: DayTime | None) -> str:
    """Outbound driver value.  ``None`` is stored as ``"00:00"``."""
    return format_daytime(v)


def scan(target: DayTime | None, src: Any) -> None:
    """Load an inbound driver value into *target*.

    Accepts ``str``, ``bytes`` or ``bytearray``; anything else is rejected
    with ``UNEXPECTED`` naming the received type.
    """
    if target is None:
        raise DayTimeError(ErrorKind.OBJ_IS_NIL)

    match src:
        case bytes() | bytearray():
            text = bytes(src).decode("utf-8", errors="replace")
            logger.debug("Scanned bytes value: %r", text)
        case str():
            text = src
        case _:
            raise DayTimeError(ErrorKind.UNEXPECTED, f"type of value '{type(src).__name__}'")

    decode_into(target, text)


class DayTimeType(TypeDecorator[DayTime]):
    """SQLAlchemy column type storing DayTime as canonical text.

    Binding ``None`` stores ``"00:00"``; a SQL ``NULL`` loads as ``None``.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value_: DayTime | None, dialect: Dialect) -> str:
        return value(value_)

    def process_result_value(self, value_: Any, dialect: Dialect) -> DayTime | None:
        if value_ is None:
            return None
        result = DayTime()
        scan(result, value_)
        return result
