# -*- coding: utf-8 -*-
"""Location: ./tests/unit/testbackend/services/test_logging_service.py
Copyright 2025
SPDX-License-Identifier: Apache-2.0

Unit tests for LoggingService and JSONFormatter.
"""

# Standard
import logging
import sys

# Third-Party
import orjson
import pytest

# First-Party
from testbackend.services.logging_service import JSONFormatter, LoggingService


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    if LoggingService._handler is not None:
        root.removeHandler(LoggingService._handler)
        LoggingService._handler = None
    root.setLevel(level)


def _record(msg="hello", args=(), exc_info=None, **extra):
    record = logging.LogRecord("testbackend.demo", logging.WARNING, __file__, 10, msg, args, exc_info)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_core_fields():
    payload = orjson.loads(JSONFormatter().format(_record("hi %s", ("there",))))
    assert payload["message"] == "hi there"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "testbackend.demo"
    assert payload["timestamp"].endswith("+00:00")


def test_json_formatter_includes_extras():
    payload = orjson.loads(JSONFormatter().format(_record(request_id="r-1", duration_ms=12.5)))
    assert payload["request_id"] == "r-1"
    assert payload["duration_ms"] == 12.5
    assert "args" not in payload
    assert "msg" not in payload


def test_json_formatter_stringifies_unknown_types():
    payload = orjson.loads(JSONFormatter().format(_record(thing=object)))
    assert payload["thing"] == str(object)


def test_json_formatter_includes_exception():
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = _record(exc_info=sys.exc_info())
    payload = orjson.loads(JSONFormatter().format(record))
    assert "RuntimeError: boom" in payload["exc_info"]


def test_configure_installs_single_handler(restore_root_logging):
    service = LoggingService()
    root = logging.getLogger()

    service.configure("debug", "text")
    first = LoggingService._handler
    service.configure("WARNING", "json")
    second = LoggingService._handler

    assert service.configured is True
    assert first not in root.handlers
    assert second in root.handlers
    assert isinstance(second.formatter, JSONFormatter)
    assert root.level == logging.WARNING


def test_configure_text_format(restore_root_logging):
    LoggingService().configure("INFO", "text")
    formatter = LoggingService._handler.formatter
    assert not isinstance(formatter, JSONFormatter)
    assert formatter._fmt == "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def test_get_logger_returns_named_logger():
    assert LoggingService().get_logger("testbackend.x") is logging.getLogger("testbackend.x")
