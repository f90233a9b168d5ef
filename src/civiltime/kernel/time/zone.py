"""ZoneOffset — a fixed offset from UTC."""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Final

from civiltime.kernel.errors import FormatError
from civiltime.kernel.time import fixed_point as fp
from civiltime.kernel.time.constants import (
    MAX_OFFSET_HOURS,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)


@dataclasses.dataclass(frozen=True, slots=True)
class ZoneOffset:
    """Fixed UTC offset ``±hh:mm[:ss]``.

    The sign is carried by the components themselves and must agree across
    them: ``-05:30`` is ``ZoneOffset(-5, -30)`` and ``-00:30`` is
    ``ZoneOffset(0, -30)``. Mixed signs are rejected.
    """

    hours: int
    minutes: int = 0
    seconds: Decimal = fp.ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "seconds", fp.to_fixed_point(self.seconds))
        components = (self.hours, self.minutes, self.seconds)
        if any(c > 0 for c in components) and any(c < 0 for c in components):
            raise FormatError(
                f"UTC offset components must share one sign: {self._describe()}"
            )
        if abs(self.hours) > MAX_OFFSET_HOURS:
            raise FormatError(
                f"UTC offset hours out of range: {self._describe()}",
                errors=[{"field": "hours", "value": self.hours}],
            )
        if abs(self.minutes) >= SECONDS_PER_MINUTE:
            raise FormatError(
                f"UTC offset minutes out of range: {self._describe()}",
                errors=[{"field": "minutes", "value": self.minutes}],
            )
        if self.seconds.copy_abs() >= SECONDS_PER_MINUTE:
            raise FormatError(
                f"UTC offset seconds out of range: {self._describe()}",
                errors=[{"field": "seconds", "value": self.seconds}],
            )

    @classmethod
    def from_seconds(cls, total: fp.SecondsLike) -> "ZoneOffset":
        """Build an offset from a signed number of seconds east of UTC."""
        value = fp.to_fixed_point(total)
        sign = -1 if value < 0 else 1
        magnitude = value.copy_abs()
        whole = fp.floor_to_int(magnitude)
        hours, rest = divmod(whole, SECONDS_PER_HOUR)
        minutes, seconds = divmod(rest, SECONDS_PER_MINUTE)
        second_part = fp.add(Decimal(seconds), fp.fractional_part(magnitude))
        if sign < 0:
            second_part = fp.negate(second_part)
        return cls(sign * hours, sign * minutes, second_part)

    @property
    def total_seconds(self) -> Decimal:
        """Signed offset in seconds; positive east of Greenwich."""
        whole = self.hours * SECONDS_PER_HOUR + self.minutes * SECONDS_PER_MINUTE
        return fp.add(Decimal(whole), self.seconds)

    @property
    def is_utc(self) -> bool:
        return not self.total_seconds

    def _describe(self) -> str:
        return f"hours={self.hours}, minutes={self.minutes}, seconds={self.seconds}"


UTC_OFFSET: Final = ZoneOffset(0, 0)


__all__ = ["UTC_OFFSET", "ZoneOffset"]
