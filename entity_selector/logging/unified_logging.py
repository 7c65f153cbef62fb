"""
Unified log line for selector output: timestamp | level | importance | message.

Importance is a 0-10 weight. Callers may pass it with
``logger.warning(..., extra={"importance": 9})``; otherwise the formatter
derives it from the level.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.config import SelectorSettings

LEVEL_TO_IMPORTANCE = {
    "DEBUG": 2,
    "INFO": 4,
    "WARNING": 6,
    "ERROR": 8,
    "CRITICAL": 10,
}
DEFAULT_IMPORTANCE = LEVEL_TO_IMPORTANCE["INFO"]

UNIFIED_DATE_FMT = "%Y-%m-%d %H:%M:%S"
UNIFIED_FORMAT_STR = "%(asctime)s | %(levelname)-8s | %(importance)s | %(message)s"

PACKAGE_LOGGER_NAME = "entity_selector"

_HANDLER_MARK = "_entity_selector_handler"


def importance_from_level(level_name: str) -> int:
    """Importance for a level name; unknown names count as INFO."""
    return LEVEL_TO_IMPORTANCE.get((level_name or "").strip().upper(), DEFAULT_IMPORTANCE)


class UnifiedFormatter(logging.Formatter):
    """Formatter filling ``record.importance`` from the level when no extra gave it."""

    def format(self, record: logging.LogRecord) -> str:
        if getattr(record, "importance", None) is None:
            record.importance = importance_from_level(record.levelname)
        return super().format(record)


def create_unified_formatter(
    fmt: str = UNIFIED_FORMAT_STR,
    datefmt: str = UNIFIED_DATE_FMT,
) -> UnifiedFormatter:
    return UnifiedFormatter(fmt=fmt, datefmt=datefmt)


def _mark(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(
    settings: "SelectorSettings",
    max_bytes: int = 10485760,
    backup_count: int = 5,
) -> logging.Logger:
    """
    Attach unified handlers to the package logger: console + optional rotating file.

    Only the ``entity_selector`` logger is touched; the root logger and the
    host application's handlers are left alone. Calling this again replaces
    the handlers installed by the previous call.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(settings.log_level_value)
    for handler in package_logger.handlers[:]:
        if getattr(handler, _HANDLER_MARK, False):
            package_logger.removeHandler(handler)
            handler.close()

    formatter = create_unified_formatter()
    package_logger.addHandler(_mark(logging.StreamHandler(), formatter))

    if settings.log_file:
        log_file = Path(settings.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            encoding="utf-8",
            mode="a",
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        package_logger.addHandler(_mark(file_handler, formatter))

    package_logger.debug("Selector logging configured (level=%s)", settings.log_level)
    return package_logger
