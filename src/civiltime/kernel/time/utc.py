"""Utc — an instant as whole seconds since the epoch plus an exact fraction."""

from __future__ import annotations

import dataclasses
from decimal import Decimal
from typing import Final

from civiltime.kernel.errors import InvariantViolationError
from civiltime.kernel.time import fixed_point as fp
from civiltime.kernel.time.constants import INT64_MAX, INT64_MIN

# INT64_MAX is about 9.2e18, so any value of 1e20 or more cannot fit
_MAX_ADJUSTED_EXPONENT: Final = 19


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class Utc:
    """Instant on the UTC time line, counted from 1970-01-01T00:00:00Z.

    ``seconds`` is a signed 64-bit count of whole seconds and ``fraction``
    the sub-second remainder, always in ``[0, 1)``; an instant before the
    epoch such as ``-0.25`` is stored as ``Utc(-1, Decimal("0.75"))``.
    Every day is exactly 86 400 seconds long.

    Instances order and compare by the instant they denote, so
    ``Utc(0, Decimal("0.5")) == Utc(0, Decimal("0.50"))``. The digit count
    of ``fraction`` is kept and drives how many digits are formatted.
    """

    seconds: int
    fraction: Decimal = fp.ZERO

    def __post_init__(self) -> None:
        object.__setattr__(self, "fraction", fp.to_fixed_point(self.fraction))
        if not INT64_MIN <= self.seconds <= INT64_MAX:
            raise InvariantViolationError(
                f"Utc seconds outside the 64-bit range: {self.seconds}"
            )
        if not fp.ZERO <= self.fraction < fp.ONE:
            raise InvariantViolationError(
                f"Utc fraction must be in [0, 1), got {self.fraction}"
            )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_decimal(cls, value: fp.SecondsLike) -> "Utc":
        """Instant *value* seconds after (or before, if negative) the epoch."""
        total = fp.to_fixed_point(value)
        _check_magnitude(total)
        return cls(fp.floor_to_int(total), fp.fractional_part(total))

    @classmethod
    def from_string(cls, text: str) -> "Utc":
        """Parse an RFC 3339 timestamp; any offset is normalised to UTC.

        Raises:
            FormatError: *text* is not a valid RFC 3339 timestamp.
        """
        from civiltime.kernel.time.rfc3339 import parse_utc

        return parse_utc(text)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def add_seconds(self, delta: fp.SecondsLike) -> "Utc":
        """Instant *delta* seconds later; *delta* may be negative or fractional.

        The delta is split into ``floor(delta)`` and its fractional part in
        ``[0, 1)``. The whole part moves ``seconds``, the fractions are
        summed and any carry (or borrow) is folded back into ``seconds``.
        """
        amount = fp.to_fixed_point(delta)
        _check_magnitude(amount)
        whole = fp.floor_to_int(amount)
        part = fp.fractional_part(amount)
        return _normalize(self.seconds + whole, fp.add(self.fraction, part))

    def diff_seconds(self, other: "Utc") -> Decimal:
        """Exact ``self - other`` in seconds; positive when *self* is later."""
        whole = Decimal(self.seconds - other.seconds)
        return fp.add(whole, fp.subtract(self.fraction, other.fraction))

    def truncate(self, precision: int | None) -> "Utc":
        """Keep at most *precision* fraction digits (``None``/negative keeps all)."""
        if precision is None or precision < 0:
            return self
        return Utc(self.seconds, fp.truncate(self.fraction, precision))

    def to_decimal(self) -> Decimal:
        """Signed seconds since the epoch as a single exact decimal."""
        return fp.add(Decimal(self.seconds), self.fraction)

    def __add__(self, delta: object) -> "Utc":
        if isinstance(delta, (Decimal, int, float)) and not isinstance(delta, bool):
            return self.add_seconds(delta)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> "Utc | Decimal":
        if isinstance(other, Utc):
            return self.diff_seconds(other)
        if isinstance(other, (Decimal, int, float)) and not isinstance(other, bool):
            return self.add_seconds(fp.negate(fp.to_fixed_point(other)))
        return NotImplemented

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def to_string(self) -> str:
        """RFC 3339 rendering in ``Z`` form.

        Raises:
            FormatError: the instant falls outside years 0000..9999.
        """
        from civiltime.kernel.time.rfc3339 import format_utc

        return format_utc(self)

    def __str__(self) -> str:
        return self.to_string()


def _check_magnitude(value: Decimal) -> None:
    # runs before floor(), which would materialise every digit
    if value.adjusted() > _MAX_ADJUSTED_EXPONENT:
        raise InvariantViolationError(
            f"Seconds value {value:.3e} is outside the 64-bit range"
        )


def _normalize(seconds: int, fraction: Decimal) -> Utc:
    carry = fp.floor_to_int(fraction)
    return Utc(seconds + carry, fp.subtract(fraction, Decimal(carry)))


EPOCH: Final = Utc(0)


__all__ = ["EPOCH", "Utc"]
