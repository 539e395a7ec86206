"""Logging infrastructure for sqlfluent.

This module provides structured logging with JSON output, context tracking,
and OpenTelemetry trace correlation.
"""

from sqlfluent.logging.filters import ContextFilter
from sqlfluent.logging.logger import CustomJsonFormatter, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "CustomJsonFormatter",
    "ContextFilter",
]
