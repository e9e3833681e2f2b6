"""Logging for the client."""

from fxoanda.monitor.logger import get_http_logger, setup_logging

__all__ = [
    "setup_logging",
    "get_http_logger",
]
