"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from civiltime.kernel.errors import BaseError


class ErrorDetailProcessor:
    """structlog processor that expands :class:`BaseError` values.

    Any event field holding a :class:`BaseError` (typically ``error=exc``)
    is replaced by the error's :meth:`~BaseError.to_dict` payload so that
    the code, message and detail (rejected text, date fields) survive JSON
    rendering.

    Usage::

        structlog.configure(processors=[ErrorDetailProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        for key, value in list(event_dict.items()):
            if isinstance(value, BaseError):
                event_dict[key] = value.to_dict()
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the stdlib logger *name*.

    Records go through stdlib :mod:`logging`, so nothing is emitted below
    the stdlib level (``WARNING`` unless the application configures it,
    e.g. with :func:`configure_logging`).

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ErrorDetailProcessor", "get_logger"]
