"""Structured logging configuration."""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

HTTP_LOGGER_NAME = "fxoanda.http"


def _utc_now() -> str:
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


class JsonFormatter(logging.Formatter):
    """JSON log formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": _utc_now(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "request_id"):
            log_data["request_id"] = record.request_id

        if hasattr(record, "extra_data"):
            log_data.update(record.extra_data)

        return json.dumps(log_data, ensure_ascii=False)


class HttpFormatter(logging.Formatter):
    """Formatter for request/response logs."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": _utc_now(),
            "event": record.getMessage(),
        }

        for attr in ["method", "url", "status_code", "request_id", "elapsed_ms"]:
            if hasattr(record, attr):
                log_data[attr] = getattr(record, attr)

        return json.dumps(log_data, ensure_ascii=False)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    log_dir: Path | None = None,
) -> None:
    """
    Configure logging for the client.

    Always logs to stderr, keeping stdout for command output. When
    ``log_dir`` is given, also writes:
    - app.log: General logs
    - errors.log: Error logs only
    - http.log: One line per API request

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_format: Use JSON formatting if True
        log_dir: Directory for log files, or None for console only
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level))

    root_logger.handlers.clear()

    if json_format:
        app_formatter = JsonFormatter()
    else:
        app_formatter = logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(app_formatter)
    root_logger.addHandler(console_handler)

    http_logger = logging.getLogger(HTTP_LOGGER_NAME)
    http_logger.setLevel(logging.DEBUG)
    http_logger.handlers.clear()

    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)

        app_handler = logging.FileHandler(log_dir / "app.log")
        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(app_formatter)
        root_logger.addHandler(app_handler)

        error_handler = logging.FileHandler(log_dir / "errors.log")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(app_formatter)
        root_logger.addHandler(error_handler)

        http_logger.propagate = False
        http_handler = logging.FileHandler(log_dir / "http.log")
        if json_format:
            http_handler.setFormatter(HttpFormatter())
        else:
            http_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
        http_logger.addHandler(http_handler)
    else:
        http_logger.propagate = True

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def get_http_logger() -> logging.Logger:
    """Get the request/response logger."""
    return logging.getLogger(HTTP_LOGGER_NAME)
