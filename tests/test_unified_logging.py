"""
Tests for unified log format (importance 0-10) and package logger setup.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import logging

import pytest

from entity_selector.core.config import SelectorSettings
from entity_selector.logging import (
    LEVEL_TO_IMPORTANCE,
    UnifiedFormatter,
    configure_logging,
    create_unified_formatter,
    importance_from_level,
)


def _record(level, msg="message", **extra):
    record = logging.LogRecord("entity_selector.test", level, __file__, 1, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.parametrize(
    "level_name,expected",
    [("DEBUG", 2), ("info", 4), ("WARNING", 6), ("ERROR", 8), ("CRITICAL", 10), ("", 4), ("NOPE", 4)],
)
def test_importance_from_level(level_name, expected):
    assert importance_from_level(level_name) == expected


def test_level_table_is_ordered():
    values = [LEVEL_TO_IMPORTANCE[k] for k in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")]
    assert values == sorted(values)


def test_formatter_adds_importance():
    formatter = create_unified_formatter()
    assert isinstance(formatter, UnifiedFormatter)
    line = formatter.format(_record(logging.WARNING, "pool offline"))
    parts = [p.strip() for p in line.split("|")]
    assert parts[1] == "WARNING"
    assert parts[2] == "6"
    assert parts[3] == "pool offline"


def test_formatter_keeps_explicit_importance():
    formatter = create_unified_formatter()
    line = formatter.format(_record(logging.INFO, "note", importance=9))
    assert "| 9 |" in line


def test_extra_importance_through_configured_logger(tmp_path, restore_package_logger):
    """extra={"importance": n} reaches the log line without raising."""
    log_file = tmp_path / "selector.log"
    configure_logging(SelectorSettings(log_file=str(log_file)))
    child = logging.getLogger("entity_selector.selector.executor")
    child.warning("pool offline", extra={"importance": 9})
    child.error("boom")
    for handler in restore_package_logger.handlers:
        handler.flush()
    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert lines[-2].endswith("| WARNING  | 9 | pool offline")
    assert lines[-1].endswith("| ERROR    | 8 | boom")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def _own_handlers(self, logger):
        return [h for h in logger.handlers if getattr(h, "_entity_selector_handler", False)]

    def test_console_handler(self, restore_package_logger):
        logger = configure_logging(SelectorSettings(log_level="DEBUG"))
        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG
        handlers = self._own_handlers(logger)
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, UnifiedFormatter)

    def test_reconfigure_replaces_handlers(self, restore_package_logger):
        configure_logging(SelectorSettings())
        logger = configure_logging(SelectorSettings(log_level="ERROR"))
        assert len(self._own_handlers(logger)) == 1
        assert logger.level == logging.ERROR

    def test_file_handler(self, tmp_path, restore_package_logger):
        log_file = tmp_path / "logs" / "selector.log"
        logger = configure_logging(SelectorSettings(log_file=str(log_file)))
        assert len(self._own_handlers(logger)) == 2
        logging.getLogger("entity_selector.selector.parser").warning("bad argument")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "| WARNING  | 6 | bad argument" in content
