"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from motionbeat.core.utils.logging import (
    StructuredJSONFormatter,
    configure_logging,
    get_logger,
    log_performance,
)


class TestStructuredJSONFormatter:
    """Tests for the JSON lines formatter."""

    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            name="motionbeat.test",
            level=logging.WARNING,
            pathname=__file__,
            lineno=10,
            msg="beat %s clamped",
            args=("exit",),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_emits_level_message_and_context(self):
        """Every record becomes one JSON object with its context."""
        entry = json.loads(StructuredJSONFormatter().format(self._record()))
        assert entry["level"] == "WARNING"
        assert entry["message"] == "beat exit clamped"
        assert entry["context"]["logger_name"] == "motionbeat.test"
        assert "timestamp" in entry

    def test_extra_fields_are_included(self):
        """Fields passed via extra= land in the context."""
        entry = json.loads(StructuredJSONFormatter().format(self._record(scene_id="intro")))
        assert entry["context"]["scene_id"] == "intro"


def test_configure_logging_to_file(tmp_path: Path):
    """File output writes formatted records at the configured level."""
    log_file = tmp_path / "run.log"
    configure_logging(level="DEBUG", filename=str(log_file), format_string="%(levelname)s:%(message)s")
    logging.getLogger("motionbeat.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "DEBUG:hello" in log_file.read_text(encoding="utf-8")
    configure_logging(level="WARNING")


def test_get_logger_with_context_returns_adapter():
    """Context kwargs wrap the logger in a LoggerAdapter."""
    assert isinstance(get_logger("x"), logging.Logger)
    adapter = get_logger("x", scene_id="intro")
    assert isinstance(adapter, logging.LoggerAdapter)
    assert adapter.extra == {"scene_id": "intro"}


def test_log_performance_preserves_result_and_name():
    """The timing decorator is transparent to callers."""

    @log_performance
    def add(a, b):
        return a + b

    assert add(2, 3) == 5
    assert add.__name__ == "add"


def test_configure_logging_leaves_other_loggers_alone():
    """Only the root logger is reconfigured; named loggers keep their level."""
    named = logging.getLogger("motionbeat.test.untouched")
    configure_logging(level="WARNING")
    assert named.level == logging.NOTSET
    assert logging.getLogger("asyncio").level == logging.NOTSET
