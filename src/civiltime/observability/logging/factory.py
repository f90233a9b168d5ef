"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import structlog

from civiltime.observability.logging.processors import ErrorDetailProcessor

if TYPE_CHECKING:
    from civiltime.config.settings import CivilTimeSettings


class JsonLoggerFactory:
    """Configure structlog on top of the stdlib root logger.

    Library modules only ever *emit* through :func:`get_logger`; wiring
    handlers is left to the application, which calls :meth:`configure`
    (or :func:`configure_logging`) once at start-up.
    """

    @staticmethod
    def configure(level: int = logging.INFO, *, json: bool = True) -> None:
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            ErrorDetailProcessor(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if json
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


def configure_logging(settings: "CivilTimeSettings | None" = None) -> None:
    """Apply the logging part of *settings* (loaded from the environment
    when omitted)."""
    if settings is None:
        from civiltime.config.settings import load_settings

        settings = load_settings()
    JsonLoggerFactory.configure(
        level=logging.getLevelName(settings.log_level.upper()),
        json=settings.log_json,
    )


__all__ = ["JsonLoggerFactory", "configure_logging"]
