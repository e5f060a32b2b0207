# core/logging_config.py

"""Logging setup for the student records program.

Modules log through `logging.getLogger(__name__)`; this module installs the single
root handler, either human-readable or JSON (one object per line).
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("student_id", "error_code", "form")


class JSONFormatter(logging.Formatter):
    """Format log records as JSON, surfacing known extra fields when present."""

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


def setup_logging(level: str = "WARNING", fmt: str = "text") -> logging.Handler:
    """Configure the root logger and return the installed handler."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return handler
