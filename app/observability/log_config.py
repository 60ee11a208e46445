"""Structured logging setup for the service runtime.

JSON lines in production, a human-readable single-line format otherwise.
Configured once at startup before the application is built.
"""

import json
import logging
from datetime import datetime, timezone

_EXTRA_FIELDS = ("method", "path", "status_code", "duration_ms", "operation")


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        """Render one record with known request extras as top-level keys.

        Args:
            record: Log record to format.

        Returns:
            str: Single-line JSON document.

        Raises:
            TypeError: Raised when an extra field value is not JSON serializable.
        """

        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def observability_configure_logging(level: str = "INFO", fmt: str = "text") -> logging.Handler:
    """Install one root stream handler with the selected format.

    Calling this again replaces the handler installed by the previous call
    instead of stacking a second one.

    Args:
        level: Logging level name.
        fmt: `json` for structured output, anything else for text.

    Returns:
        logging.Handler: The installed root handler.
    """

    handler = logging.StreamHandler()
    handler.set_name("app-root")
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s - %(message)s"))

    for existing_handler in list(logging.root.handlers):
        if existing_handler.get_name() == "app-root":
            logging.root.removeHandler(existing_handler)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
