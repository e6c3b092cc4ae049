"""Structured Logging: JSON formatter and setup for request-building logs.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, method, error_code, url_path) surfaced when present
    - JSON format by default, human-readable when fmt is anything else

Design Decisions:
    - JSONFormatter on stdlib logging, no third-party logging library
    - setup_logging owns one RoutingLogHandler on the root logger and replaces it
      on every call; services/bootstrap.configure_logging feeds it Settings
"""

import logging
import json
from datetime import datetime, timezone

EXTRA_FIELDS = ("operation", "method", "error_code", "url_path")


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class RoutingLogHandler(logging.StreamHandler):
    """Root stream handler owned by setup_logging; at most one installed."""


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging and return the installed handler.

    Calling again replaces the handler from the previous call, so settings
    can be re-applied without duplicating output.
    """
    for existing in list(logging.root.handlers):
        if isinstance(existing, RoutingLogHandler):
            logging.root.removeHandler(existing)
    handler = RoutingLogHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
