"""Database driver adapter and SQLAlchemy column type."""

from daytime.infrastructure.database.types import DayTimeType, scan, value

__all__ = [
    "DayTimeType",
    "scan",
    "value",
]
