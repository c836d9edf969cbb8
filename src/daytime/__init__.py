"""daytime — a validated time-of-day value with anchoring and codecs."""

from daytime.domain.anchoring import Rollover, at_today, in_the_near_future, in_the_recent_past
from daytime.domain.daytime import DEFAULT_TIME, DayTime, format_daytime, new, parse
from daytime.domain.errors import DayTimeError, ErrorKind

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TIME",
    "DayTime",
    "DayTimeError",
    "ErrorKind",
    "Rollover",
    "__version__",
    "at_today",
    "format_daytime",
    "in_the_near_future",
    "in_the_recent_past",
    "new",
    "parse",
]
