"""Structured Logging — JSON formatter and setup."""

import json
import logging

from dog_service.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "dog_service.test", logging.ERROR, __file__, 1, "boom %s", ("here",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "ERROR"
    assert log["logger"] == "dog_service.test"
    assert log["message"] == "boom here"
    assert "timestamp" in log


def test_json_formatter_surfaces_extras_when_present():
    log = json.loads(JSONFormatter().format(
        _record(operation="create", dog_id=7, error_code="PERSISTENCE_ERROR"),
    ))
    assert log["operation"] == "create"
    assert log["dog_id"] == 7
    assert log["error_code"] == "PERSISTENCE_ERROR"
    assert "path" not in log


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    first = setup_logging("DEBUG", "json")
    second = setup_logging("WARNING", "text")
    try:
        assert first not in logging.root.handlers
        assert second in logging.root.handlers
        assert isinstance(second.formatter, logging.Formatter)
        assert not isinstance(second.formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        logging.root.handlers[:] = before
        logging.root.setLevel(level)
