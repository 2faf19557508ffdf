"""Structured logging configuration.

Provides JSON-formatted logs with:
- Category detection (codec, scene, render, cli, system)
- Extra fields passed through `extra=` collected under "extra"
- A human-readable format for interactive use
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class StructuredFormatter(logging.Formatter):
    """JSON line formatter."""

    # Map logger names to categories
    CATEGORY_MAP = {
        "patchwork.codec": "codec",
        "patchwork.shapes.records": "codec",
        "patchwork.shapes": "scene",
        "patchwork.commands": "scene",
        "patchwork.rendering": "render",
        "patchwork.cli": "cli",
        "PIL": "render",
    }

    # Attributes every LogRecord carries; anything else came from extra=
    STANDARD_FIELDS = frozenset(
        vars(logging.LogRecord("", logging.NOTSET, "", 0, "", (), None))
    ) | {"message", "asctime"}

    def _get_category(self, logger_name: str) -> str:
        """First matching prefix wins."""
        return next(
            (cat for prefix, cat in self.CATEGORY_MAP.items() if logger_name.startswith(prefix)),
            "system",
        )

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "category": self._get_category(record.name),
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {
            key: value
            for key, value in vars(record).items()
            if key not in self.STANDARD_FIELDS and not key.startswith("_")
        }
        if extra:
            entry["extra"] = extra
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        # Values json cannot encode (paths, colors) are written as str()
        return json.dumps(entry, default=str)


def configure_logging(
    *,
    json_format: bool = True,
    log_level: int = logging.INFO,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Configure application logging.

    Args:
        json_format: Use JSON formatting (False for human-readable)
        log_level: Minimum log level
        log_file: Path to main log file (None for stream only)
        stream: Stream to write to (default: sys.stderr)
    """
    import sys

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter: logging.Formatter
    if json_format:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)5s [%(name)s] %(message)s",
            datefmt="%H:%M:%S",
        )

    stream_handler = logging.StreamHandler(stream or sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # Pillow logs plugin discovery at debug level
    logging.getLogger("PIL").setLevel(logging.WARNING)

