"""Kernel time – Clock protocol, implementations and the ClockSource façade."""
from __future__ import annotations

import time
from typing import Protocol

from civiltime.kernel.time import fixed_point as fp
from civiltime.kernel.time.calendar import Date
from civiltime.kernel.time.civil import utc_to_civil
from civiltime.kernel.time.constants import NANOS_PER_SECOND
from civiltime.kernel.time.utc import Utc
from civiltime.observability.logging import get_logger

logger = get_logger(__name__)


class Clock(Protocol):
    """Port: wall clock plus monotonic clock, swappable for deterministic tests."""

    def now(self) -> Utc: ...
    def monotonic(self) -> float: ...
    def today(self) -> Date: ...
    def timestamp(self) -> float: ...


class SystemClock:
    """Production clock backed by the OS.

    Wall time comes from :func:`time.time_ns` so the sub-second part is an
    exact nanosecond count; the monotonic reading comes from
    :func:`time.monotonic` and never from the wall clock, which may be
    stepped backwards.
    """

    def now(self) -> Utc:
        seconds, nanos = divmod(time.time_ns(), NANOS_PER_SECOND)
        return Utc(seconds, fp.from_nanoseconds(nanos))

    def monotonic(self) -> float:
        return time.monotonic()

    def today(self) -> Date:
        return utc_to_civil(self.now()).date

    def timestamp(self) -> float:
        return time.time()


class FrozenClock:
    """Test clock pinned to a fixed instant."""

    def __init__(self, fixed: Utc, monotonic_start: float = 0.0) -> None:
        self._fixed = fixed
        self._monotonic = monotonic_start

    def now(self) -> Utc:
        return self._fixed

    def monotonic(self) -> float:
        return self._monotonic

    def today(self) -> Date:
        return utc_to_civil(self._fixed).date

    def timestamp(self) -> float:
        return float(self._fixed.to_decimal())

    def advance(self, seconds: fp.SecondsLike) -> None:
        """Move wall and monotonic time forward by *seconds*."""
        amount = fp.to_fixed_point(seconds)
        if amount < 0:
            raise ValueError("FrozenClock can only move forward")
        self._fixed = self._fixed.add_seconds(amount)
        self._monotonic += float(amount)


class ClockSource:
    """Façade over a :class:`Clock` with configurable precision truncation.

    Parameters
    ----------
    clock:
        Underlying clock; defaults to :class:`SystemClock`.
    precision:
        Default number of fraction digits kept by :meth:`now`. ``0`` yields
        whole seconds; ``None`` or a negative value keeps the clock's full
        precision.
    """

    def __init__(self, clock: Clock | None = None, precision: int | None = None) -> None:
        self._clock: Clock = clock if clock is not None else SystemClock()
        self._precision = precision
        logger.debug(
            "clock_source.created",
            clock=type(self._clock).__name__,
            precision=precision,
        )

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def precision(self) -> int | None:
        return self._precision

    def now(self, precision: int | None = None) -> Utc:
        """Current instant, truncated to *precision* digits.

        A per-call *precision* wins over the instance default.
        """
        effective = self._precision if precision is None else precision
        return self._clock.now().truncate(effective)

    def monotonic_now(self) -> float:
        """Seconds since an arbitrary, process-local origin; never decreases.

        Not comparable across processes and not meant for display.
        """
        return self._clock.monotonic()


def utc_now(precision: int | None = None) -> Utc:
    """Shorthand for ``SystemClock().now()`` truncated to *precision*."""
    return SystemClock().now().truncate(precision)


__all__ = ["Clock", "ClockSource", "FrozenClock", "SystemClock", "utc_now"]
