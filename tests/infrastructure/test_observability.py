"""Structured logging tests - formatter output and handler installation."""

import json
import logging

from wallboard.infrastructure.observability import (
    JSONFormatter, WidgetTextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "wallboard.test", logging.WARNING, __file__, 1, "Fetch failed: %s", ("boom",), None,
    )
    for k, v in extra.items():
        setattr(record, k, v)
    return record


def test_json_formatter_base_fields():
    log = json.loads(JSONFormatter().format(_record()))
    assert log["level"] == "WARNING"
    assert log["logger"] == "wallboard.test"
    assert log["message"] == "Fetch failed: boom"
    assert "widget" not in log


def test_json_formatter_groups_widget_fields():
    log = json.loads(JSONFormatter().format(
        _record(widget_id="w1", widget_type="news", action="SET_WIDGET_ERROR",
                error_code="WIDGET_FETCH_FAILED"),
    ))
    assert log["widget"] == {"id": "w1", "type": "news", "action": "SET_WIDGET_ERROR"}
    assert log["error_code"] == "WIDGET_FETCH_FAILED"
    assert "widget_id" not in log


def test_json_formatter_drops_absent_widget_fields():
    log = json.loads(JSONFormatter().format(_record(widget_id="w1", widget_type=None)))
    assert log["widget"] == {"id": "w1"}


def test_text_formatter_appends_widget_context():
    line = WidgetTextFormatter().format(_record(widget_id="w1", action="REMOVE_WIDGET"))
    assert line.endswith("Fetch failed: boom [id=w1 action=REMOVE_WIDGET]")
    assert "[" not in WidgetTextFormatter().format(_record())


def test_setup_logging_replaces_its_own_handler():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        first = setup_logging("DEBUG", "json")
        second = setup_logging("INFO", "text")
        installed = [h for h in logging.root.handlers if h not in before]
        assert installed == [second]
        assert first not in logging.root.handlers
        assert isinstance(second.formatter, WidgetTextFormatter)
        assert logging.root.level == logging.INFO
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
