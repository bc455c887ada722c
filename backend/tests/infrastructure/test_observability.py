"""Structured Logging — JSON lines with whitelisted gateway extras.

Tests cover:
    - Base fields, service name, and the record's own timestamp
    - Gateway extras surfaced; None and unknown extras dropped
    - setup_logging replaces its own handler on repeat calls
"""

import json
import logging
from datetime import datetime

import pytest

from taskhub.infrastructure.observability import (
    SERVICE, JSONFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "taskhub.test", logging.INFO, __file__, 1, "dispatched %s", ("task",), None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_base_fields():
    out = json.loads(JSONFormatter().format(_record()))
    assert out["level"] == "INFO"
    assert out["logger"] == "taskhub.test"
    assert out["service"] == SERVICE
    assert out["message"] == "dispatched task"


def test_timestamp_is_record_time():
    record = _record()
    record.created = 0.0
    out = json.loads(JSONFormatter().format(record))
    assert datetime.fromisoformat(out["timestamp"]).year == 1970


def test_json_formatter_surfaces_gateway_extras():
    out = json.loads(JSONFormatter().format(_record(
        entity_kind="task", operation="create", member_id="m1", error_code=None,
    )))
    assert out["entity_kind"] == "task"
    assert out["operation"] == "create"
    assert out["member_id"] == "m1"
    assert "error_code" not in out


def test_json_formatter_ignores_unknown_extras():
    out = json.loads(JSONFormatter().format(_record(api_key="secret")))
    assert "api_key" not in out
    assert "secret" not in json.dumps(out)


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_is_idempotent(restore_root_logger):
    first = setup_logging("debug", "json")
    second = setup_logging("warning", "text")
    handlers = restore_root_logger.handlers
    assert second in handlers
    assert first not in handlers
    assert restore_root_logger.level == logging.WARNING
    assert not isinstance(second.formatter, JSONFormatter)
