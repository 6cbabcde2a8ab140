"""Structured Logging — one root handler, JSON or plain text.

Invariants:
    - setup_logging installs at most one handler per process, however many
      times the lifespan runs
    - Request path, error code, DAO operation, and entity id travel as
      ``extra`` fields and appear as top-level JSON keys
"""

import json
import logging
from datetime import datetime, timezone

HANDLER_NAME = "qa_service"
_EXTRA_FIELDS = ("error_code", "path", "operation", "entity", "entity_id")


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, str(record.__dict__[key]))
            for key in _EXTRA_FIELDS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Attach the service handler to the root logger and set the level."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    handler = next((h for h in root.handlers if h.name == HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.name = HANDLER_NAME
        root.addHandler(handler)
    handler.setFormatter(
        JSONFormatter() if fmt == "json"
        else logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    return handler
