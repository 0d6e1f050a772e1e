"""Logging setup.

Modules log through `logging.getLogger(__name__)`; this module only decides
where records go and how they look. JSON output is one object per line:

    {"timestamp": "2025-05-29T07:53:44.123456+00:00", "level": "INFO",
     "logger": "src.domain.services.grading_periods",
     "message": "Created grading period", "resource_id": "..."}

Fields passed through `extra=` are copied into the object when they are
JSON-serialisable, stringified otherwise.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from src.infrastructure.config import Settings

# Attributes every LogRecord has; anything else came from extra=.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}

PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key in _RESERVED_ATTRS or key.startswith("_"):
                continue
            log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_data, default=str)


def configure_logging(settings: Settings) -> logging.Logger:
    """Install a single stdout handler on the root logger.

    Safe to call more than once; previous handlers are replaced.
    """
    handler = logging.StreamHandler(sys.stdout)
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.log_level.upper())

    # SQLAlchemy echo is configured on the engine; keep its logger quiet otherwise.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return root
