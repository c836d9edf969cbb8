"""Binary, text, JSON, and CSV codecs for DayTime.

Encoders never raise and render ``None`` as ``"00:00"``.  Decoders
write into an existing DayTime *target*:

1. ``target is None`` raises ``OBJ_IS_NIL`` before the payload is read.
2. The payload is parsed; failures are re-raised wrapped with ``"parse"``.
3. Only then is the whole triple of *target* replaced.

JSON payloads are quoted string literals (``"01:02:03"`` including the
quotes), so the output is always a valid JSON document.
"""

from __future__ import annotations

import json
import logging

from daytime.domain.daytime import DayTime, format_daytime, parse
from daytime.domain.errors import DayTimeError, ErrorKind

logger = logging.getLogger(__name__)


def decode_into(target: DayTime | None, text: str) -> None:
    """Parse *text* and overwrite *target* on success.

    Shared final step of every decoder.  *target* is untouched on failure.
    """
    if target is None:
        raise DayTimeError(ErrorKind.OBJ_IS_NIL)
    try:
        parsed = parse(text)
    except DayTimeError as exc:
        raise exc.wrap("parse") from exc
    target._assign(parsed)


def _require_target(target: DayTime | None) -> DayTime:
    if target is None:
        raise DayTimeError(ErrorKind.OBJ_IS_NIL)
    return target


def _decode_utf8(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DayTimeError(ErrorKind.INVALID, "parse", "utf-8 payload") from exc


# --- binary ---


def marshal_binary(value: DayTime | None) -> bytes:
    return format_daytime(value).encode("utf-8")


def unmarshal_binary(target: DayTime | None, data: bytes) -> None:
    _require_target(target)
    decode_into(target, _decode_utf8(data))


# --- text ---


def marshal_text(value: DayTime | None) -> str:
    return format_daytime(value)


def unmarshal_text(target: DayTime | None, data: str) -> None:
    decode_into(target, data)


# --- JSON ---


def marshal_json(value: DayTime | None) -> str:
    """Encode as a JSON string literal, e.g. ``'"01:02:03"'``."""
    return json.dumps(format_daytime(value))


def unmarshal_json(target: DayTime | None, data: str | bytes) -> None:
    """Decode a JSON string literal into *target*.

    Raises:
        DayTimeError: ``OBJ_IS_NIL`` without a target, ``INVALID`` for
            malformed JSON or text, ``UNEXPECTED`` for a non-string value.
    """
    _require_target(target)
    if isinstance(data, (bytes, bytearray)):
        data = _decode_utf8(data)
    try:
        decoded = json.loads(data)
    except json.JSONDecodeError as exc:
        raise DayTimeError(ErrorKind.INVALID, "parse", f"json {exc.msg}") from exc
    if not isinstance(decoded, str):
        logger.debug("JSON payload decoded to %s, expected str", type(decoded).__name__)
        raise DayTimeError(
            ErrorKind.UNEXPECTED, "parse", f"type of value '{type(decoded).__name__}'"
        )
    decode_into(target, decoded)


# --- CSV ---


def marshal_csv(value: DayTime | None) -> str:
    return format_daytime(value)


def unmarshal_csv(target: DayTime | None, field: str) -> None:
    decode_into(target, field)
