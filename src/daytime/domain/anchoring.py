"""Anchoring — resolving a bare DayTime into a concrete datetime.

All functions are pure: they read the current moment (once per call,
unless *now* is given) and never mutate the DayTime.  ``None`` is
treated as midnight.

The anchored wall time is localised on its own, not by borrowing the
offset of *now*: a time on the far side of a daylight-saving switch gets
the offset in force at that time.

- *now* omitted or naive: the system local zone, via ``astimezone()``.
- *now* aware: the tzinfo of *now* (a ``ZoneInfo`` applies its own rules).

Day rollover defaults to a fixed 24-hour offset.  ``Rollover.CALENDAR``
keeps the wall-clock time instead, which differs only across a
daylight-saving transition.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from enum import StrEnum

from daytime.domain.daytime import DayTime

DAY = timedelta(hours=24)


class Rollover(StrEnum):
    """How one day is added to or subtracted from an anchored datetime."""

    FIXED = "fixed"
    CALENDAR = "calendar"


def local_now() -> datetime:
    """Current moment as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


def _reference(now: datetime | None) -> tuple[datetime, tzinfo | None]:
    """Return the aware reference moment and the zone to localise into.

    A ``None`` zone means the system local zone.
    """
    if now is None:
        return local_now(), None
    if now.tzinfo is None:
        return now.astimezone(), None
    return now, now.tzinfo


def _localise(wall: datetime, zone: tzinfo | None) -> datetime:
    if zone is None:
        return wall.astimezone()
    return wall.replace(tzinfo=zone)


def _anchor(value: DayTime | None, reference: datetime, zone: tzinfo | None) -> datetime:
    if value is None:
        value = DayTime()
    return _localise(datetime.combine(reference.date(), value.to_time()), zone)


def _shift(
    moment: datetime, delta: timedelta, rollover: Rollover, zone: tzinfo | None
) -> datetime:
    if rollover is Rollover.CALENDAR:
        return _localise(moment.replace(tzinfo=None) + delta, zone)
    # astimezone(None) converts to the system local zone.
    return (moment.astimezone(UTC) + delta).astimezone(zone)


def at_today(value: DayTime | None, *, now: datetime | None = None) -> datetime:
    """Today's date (taken from *now*) at the stored time, microsecond zero."""
    reference, zone = _reference(now)
    return _anchor(value, reference, zone)


def in_the_near_future(
    value: DayTime | None,
    *,
    now: datetime | None = None,
    rollover: Rollover = Rollover.FIXED,
) -> datetime:
    """Soonest occurrence of *value* that is not before *now* (today or tomorrow)."""
    reference, zone = _reference(now)
    moment = _anchor(value, reference, zone)
    if moment < reference:
        moment = _shift(moment, DAY, rollover, zone)
    return moment


def in_the_recent_past(
    value: DayTime | None,
    *,
    now: datetime | None = None,
    rollover: Rollover = Rollover.FIXED,
) -> datetime:
    """Most recent occurrence of *value* that is not after *now* (today or yesterday)."""
    reference, zone = _reference(now)
    moment = _anchor(value, reference, zone)
    if moment > reference:
        moment = _shift(moment, -DAY, rollover, zone)
    return moment
