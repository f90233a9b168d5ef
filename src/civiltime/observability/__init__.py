"""Observability – structured logging."""

from civiltime.observability.logging import (
    ErrorDetailProcessor,
    JsonLoggerFactory,
    Logger,
    configure_logging,
    get_logger,
)

__all__ = [
    "ErrorDetailProcessor",
    "JsonLoggerFactory",
    "Logger",
    "configure_logging",
    "get_logger",
]
