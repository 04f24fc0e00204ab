"""Structured Logging — one JSON line per catalog event.

Invariants:
    - Every line carries timestamp, level, logger name, and message
    - Rejection context (isbn, field, error_code) appears only when the
      catalog service attached it via `extra=`
    - Non-ASCII titles and author names are written as-is, not escaped

Design Decisions:
    - Catalog extras are a fixed tuple (EXTRA_FIELDS): the formatter never
      dumps arbitrary record attributes, so log shape stays stable for consumers
    - setup_logging returns its handler so callers (and tests) can detach it;
      bookstore.main.configure is the only production caller
"""

import logging
import json
from datetime import datetime, timezone


EXTRA_FIELDS: tuple[str, ...] = ("isbn", "field", "error_code")


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


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Configure root logging for the application. Returns the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
