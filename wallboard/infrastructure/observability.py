"""Structured Logging - widget-aware formatters and idempotent setup.

Invariants:
    - Every record carries timestamp (from record.created), level, logger, message
    - widget_id / widget_type / action are grouped under one "widget" object, omitted when all absent
    - error_code and path stay top-level: they describe the failure and the request, not the widget
    - setup_logging() installs exactly one wallboard handler on the root logger, however often it runs

Design Decisions:
    - Formatters on stdlib logging: call sites pass widget fields through extra={...}
    - Text format appends the same widget context in brackets so dev logs stay greppable by id
"""

import json
import logging
from datetime import datetime, timezone

# extra= key -> key inside the "widget" object
_WIDGET_FIELDS = {"widget_id": "id", "widget_type": "type", "action": "action"}
_REQUEST_FIELDS = ("error_code", "path")


def widget_context(record: logging.LogRecord) -> dict:
    """Collect the widget fields a call site attached via extra=."""
    return {
        out_key: record.__dict__[key]
        for key, out_key in _WIDGET_FIELDS.items()
        if record.__dict__.get(key) is not None
    }


class JSONFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        widget = widget_context(record)
        if widget:
            log["widget"] = widget
        for key in _REQUEST_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


class WidgetTextFormatter(logging.Formatter):
    """Human-readable line with a trailing [id=.. type=.. action=..] block."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s - %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        widget = widget_context(record)
        if not widget:
            return line
        pairs = " ".join(f"{k}={v}" for k, v in widget.items())
        head, sep, tail = line.partition("\n")
        return f"{head} [{pairs}]{sep}{tail}"


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install (or replace) the wallboard handler on the root logger."""
    for existing in list(logging.root.handlers):
        if getattr(existing, "_wallboard", False):
            logging.root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler._wallboard = True
    handler.setFormatter(JSONFormatter() if fmt == "json" else WidgetTextFormatter())
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
