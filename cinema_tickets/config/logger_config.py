"""Centralized logging configuration."""

import sys

from loguru import logger as loguru_logger


log_format = ' | '.join(
    (
        '<lk>{time:YYYY-MM-DD HH:mm:ss.SSS}</>',
        '<lvl>{level:<8}</>',
        '<c>{name}:{function}:{line}</>',
        '{message}',
    )
)

_handler_id: int | None = None


def configure_logging(level: str = 'INFO') -> int:
    """Add the project's stderr sink, replacing the one a previous call added.

    Sinks set up by the host application are left untouched. Returns the
    loguru handler id of the new sink.
    """
    global _handler_id
    handler_id = loguru_logger.add(sys.stderr, format=log_format, level=level.upper())
    if _handler_id is not None:
        loguru_logger.remove(_handler_id)
    _handler_id = handler_id
    return handler_id
