"""Structured logging for termgrid using structlog.

The terminal is the display surface, so nothing is logged to stdout or
stderr. Without a log file the package logger only carries a
``NullHandler``; ``configure_logging`` attaches a file handler when asked.
"""

from __future__ import annotations

import logging
from pathlib import Path

import structlog

PACKAGE_LOGGER = "termgrid"

_LEVEL_MAP = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())

_PROCESSORS = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
]


def _resolve_level(level: str) -> int:
    return _LEVEL_MAP.get(level.lower(), logging.WARNING)


def configure_logging(*, level: str = "warning", log_file: Path | None = None) -> None:
    """Route termgrid logs to ``log_file`` at the given level.

    Parameters
    ----------
    level: str
            Minimum level (debug, info, warning, error, critical).
    log_file: Optional[Path]
            File to append to. When omitted, logs are discarded.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_level = _resolve_level(level)
    logger.setLevel(log_level)
    logger.propagate = False

    if log_file is None:
        logger.addHandler(logging.NullHandler())
        return

    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger wrapping the stdlib logger of that name.

    Loggers are wrapped locally instead of through ``structlog.configure``
    so a host application keeps its own structlog setup.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or PACKAGE_LOGGER),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
