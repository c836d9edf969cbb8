"""structlog configuration for daytime.

Two output modes, both on stderr:
- Human (default): console renderer, colored on a TTY
- JSON (--log-json): one JSON object per line

Stdlib ``logging`` calls inside the package are routed through the same
processors.  Fields passed via ``extra=`` become event keys, with DayTime
values rendered in canonical form and datetimes as ISO 8601.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from enum import Enum

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger

from daytime.domain.daytime import DayTime, format_daytime

PACKAGE_LOGGER = "daytime"

# Loggers that stay at WARNING even with --verbose.
QUIET_LOGGERS = ("sqlalchemy",)


def render_daytime_values(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Replace DayTime, datetime and enum values with their string forms."""
    for key, val in event_dict.items():
        if isinstance(val, DayTime):
            event_dict[key] = format_daytime(val)
        elif isinstance(val, datetime):
            event_dict[key] = val.isoformat()
        elif isinstance(val, Enum):
            event_dict[key] = str(val.value)
    return event_dict


def _shared_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        render_daytime_values,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Configure structlog processors and output routing.

    Safe to call more than once; the root handler is replaced each time.

    Args:
        verbose: DEBUG for the ``daytime`` loggers. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
