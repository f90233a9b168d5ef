"""Observability – structured logging ports and helpers."""
from civiltime.observability.logging.protocol import Logger
from civiltime.observability.logging.factory import JsonLoggerFactory, configure_logging
from civiltime.observability.logging.processors import ErrorDetailProcessor, get_logger

__all__ = [
    "ErrorDetailProcessor",
    "JsonLoggerFactory",
    "Logger",
    "configure_logging",
    "get_logger",
]
