"""Logging utilities for ectype.

The library only emits records through the ``"ectype"`` logger hierarchy.
Applications that want ready-made output can call :func:`configure_logging`.
"""

from __future__ import annotations

import datetime
import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

_ROTATION_BACKUPS = 5
_JSON_LOG_MAX_BYTES = 5 * 1024 * 1024

logger = logging.getLogger("ectype")


class ConsoleFormatter(logging.Formatter):
    """Console formatter that appends structured payloads when available."""

    def __init__(self) -> None:
        """Set up the formatter with the standard console template."""
        super().__init__("%(levelname)s: %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        """Render *record* optionally appending its ``json`` payload."""
        base = super().format(record)
        payload = getattr(record, "json", None)
        if not isinstance(payload, dict) or not payload:
            return base
        try:
            payload_text = json.dumps(payload, ensure_ascii=False)
        except TypeError:
            payload_text = json.dumps(str(payload), ensure_ascii=False)
        return f"{base} {payload_text}"


class JsonFormatter(logging.Formatter):
    """Convert log records into JSON strings."""

    def format(self, record: logging.LogRecord) -> str:
        """Return *record* serialised as a single JSON object."""
        record.message = record.getMessage()
        payload: Any = getattr(record, "json", None)
        if isinstance(payload, dict):
            data = dict(payload)
            data.setdefault("message", record.message)
            data.setdefault("level", record.levelname)
        else:
            data = {"message": record.message, "level": record.levelname}
            if payload is not None:
                data["data"] = payload
        data.setdefault("logger", record.name)
        data.setdefault(
            "timestamp",
            datetime.datetime.now(datetime.UTC).isoformat(timespec="seconds"),
        )
        if record.exc_info and "exc_info" not in data:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False, default=str)


class JsonlHandler(RotatingFileHandler):
    """Write log records as JSON lines with built-in rotation."""

    def __init__(
        self,
        filename: Path | str,
        *,
        max_bytes: int | None = None,
        backup_count: int = _ROTATION_BACKUPS,
        encoding: str = "utf-8",
        delay: bool = False,
    ) -> None:
        """Initialise handler ensuring the log directory exists."""
        path = Path(filename)
        path.parent.mkdir(parents=True, exist_ok=True)
        if max_bytes is None:
            max_bytes = _JSON_LOG_MAX_BYTES
        super().__init__(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding=encoding,
            delay=delay,
        )
        self.setFormatter(JsonFormatter())


def configure_logging(
    level: int = logging.INFO,
    *,
    json_path: str | Path | None = None,
) -> None:
    """Attach console and optional JSON-lines handlers to the ectype logger.

    Calling it again once handlers are attached is a no-op.
    """
    if logger.handlers:
        return

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(stream_handler)

    if json_path is not None:
        json_handler = JsonlHandler(json_path)
        json_handler.setLevel(logging.DEBUG)
        logger.addHandler(json_handler)

    logger.setLevel(logging.DEBUG if json_path is not None else level)
