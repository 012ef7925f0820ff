"""JSON log lines for the page build, one object per record on stderr."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

BUILD_ATTRIBUTES = ("source", "output", "bytes_written", "marker")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        # Paths, output size and missing markers passed via extra=
        for attr in BUILD_ATTRIBUTES:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def setup_logging(default_level: str | int = logging.INFO) -> None:
    """Send build logs through JsonFormatter at LOG_LEVEL (or ``default_level``)."""
    level = os.environ.get("LOG_LEVEL", default_level)
    root = logging.getLogger()
    root.setLevel(level)

    stream_handlers = [h for h in root.handlers if isinstance(h, logging.StreamHandler)]
    if stream_handlers:
        for handler in stream_handlers:
            handler.setFormatter(JsonFormatter())
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
