"""Log formatting for production observability.

The JSON formatter is selected from settings (``LOG_FORMAT=json``); the
plain formatter is used everywhere else.
"""

import json
import logging
from datetime import datetime, timezone

EXTRA_FIELDS = ("event_id", "booking_id", "slug", "error_code", "operation")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

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
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)
