"""
Logging setup for the CLI and the web app.

Text output is meant for a terminal. JSON output puts one object per line
with the source location and, for conversion records, the ``asin``,
``domain`` and ``error_code`` passed through ``extra=``.
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Attributes set through ``extra=`` by the converter
CONVERSION_FIELDS = ("asin", "domain", "error_code")


class JSONFormatter(JsonFormatter):
    """One JSON object per record, with location and conversion fields."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict):
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = self.formatTime(record)
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["location"] = f"{record.module}.{record.funcName}:{record.lineno}"

        for field in CONVERSION_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                log_record[field] = value


def _build_formatter(log_format: str) -> logging.Formatter:
    if os.environ.get("LOG_FORMAT", "").lower() == "json" or log_format.lower() == "json":
        return JSONFormatter("%(message)s")
    return logging.Formatter(TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: Path | None = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
) -> None:
    """
    Replace the root logger's handlers with a stdout handler and,
    optionally, a rotating file handler.

    Args:
        level: Log level name. Unknown names fall back to INFO.
        log_format: "text" or "json". LOG_FORMAT=json in the environment
            forces JSON.
        log_file: Optional file path; parent directories are created.
        max_bytes: File size that triggers rotation.
        backup_count: Rotated files to keep.
    """
    formatter = _build_formatter(log_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    # uvicorn logs every request at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    root_logger.debug(f"Logging configured: level={level}, json={isinstance(formatter, JSONFormatter)}")
