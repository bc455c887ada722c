"""Structured Logging — one JSON object per line for every gateway log record.

Invariants:
    - Each line carries the record's own time (record.created), level, logger,
      service and message
    - Only whitelisted gateway extras are emitted (GATEWAY_EXTRAS); anything
      else attached to a record, an API key included, is dropped
    - setup_logging is idempotent: calling it again replaces its own handler
      instead of stacking a second one

Design Decisions:
    - Stdlib logging with a custom Formatter, no structlog
    - sqlalchemy.engine pinned to WARNING: statement echo would log filter values
"""

import json
import logging
from datetime import datetime, timezone

SERVICE = "taskhub-gateway"

GATEWAY_EXTRAS = (
    "error_code", "entity_kind", "operation", "entity_id", "member_id", "path",
)

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_NAME = "taskhub"


class JSONFormatter(logging.Formatter):
    """Render a LogRecord as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": SERVICE,
            "message": record.getMessage(),
        }
        payload.update(gateway_extras(record))
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def gateway_extras(record: logging.LogRecord) -> dict:
    """Whitelisted extras present on `record`, None values dropped."""
    return {
        key: record.__dict__[key]
        for key in GATEWAY_EXTRAS
        if record.__dict__.get(key) is not None
    }


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the gateway handler on the root logger (once)."""
    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        JSONFormatter() if fmt == "json" else logging.Formatter(_TEXT_FORMAT),
    )
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return handler
