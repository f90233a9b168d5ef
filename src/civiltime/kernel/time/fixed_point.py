"""FixedPointSeconds — exact decimal seconds arithmetic.

Seconds are carried as :class:`decimal.Decimal` so that fractional parts
such as ``0.123456789`` survive parsing, arithmetic and formatting without
binary floating-point error. Every operation runs in :data:`EXACT_CONTEXT`,
whose precision is the implementation maximum, so additions and
subtractions never round.
"""

from __future__ import annotations

import decimal
import math
from decimal import Decimal
from typing import TypeAlias

from civiltime.kernel.errors import ValidationError

FixedPointSeconds: TypeAlias = Decimal
SecondsLike: TypeAlias = "Decimal | int | float | str"

EXACT_CONTEXT = decimal.Context(
    prec=decimal.MAX_PREC,
    Emax=decimal.MAX_EMAX,
    Emin=decimal.MIN_EMIN,
    traps=[decimal.InvalidOperation, decimal.DivisionByZero, decimal.Overflow],
)

ZERO = Decimal(0)
ONE = Decimal(1)


def to_fixed_point(value: SecondsLike) -> FixedPointSeconds:
    """Coerce *value* into an exact, finite :class:`Decimal`.

    Floats go through ``str()`` first so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary expansion.

    Raises:
        ValidationError: *value* is a bool, is not finite, or is a string
            that is not a decimal number.
        TypeError: *value* is of an unsupported type.
    """
    if isinstance(value, bool):
        raise ValidationError(f"Expected a number of seconds, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        result = Decimal(str(value))
    elif isinstance(value, str):
        try:
            result = Decimal(value.strip())
        except decimal.InvalidOperation as exc:
            raise ValidationError(
                f"Not a decimal number of seconds: {value!r}", cause=exc
            ) from exc
    else:
        raise TypeError(f"Cannot convert {type(value).__name__} to seconds")

    if not result.is_finite():
        raise ValidationError(f"Seconds must be finite, got {value!r}")
    return result


def add(a: FixedPointSeconds, b: FixedPointSeconds) -> FixedPointSeconds:
    return EXACT_CONTEXT.add(a, b)


def subtract(a: FixedPointSeconds, b: FixedPointSeconds) -> FixedPointSeconds:
    return EXACT_CONTEXT.subtract(a, b)


def negate(a: FixedPointSeconds) -> FixedPointSeconds:
    return EXACT_CONTEXT.minus(a)


def floor_to_int(a: FixedPointSeconds) -> int:
    """Largest integer ``<= a`` (rounds toward negative infinity)."""
    return math.floor(a)


def fractional_part(a: FixedPointSeconds) -> FixedPointSeconds:
    """``a - floor(a)``; always in ``[0, 1)``, even for negative *a*."""
    return subtract(a, Decimal(floor_to_int(a)))


def truncate(a: FixedPointSeconds, digits: int) -> FixedPointSeconds:
    """Drop decimal places beyond *digits*, rounding toward zero.

    A negative *digits* leaves *a* untouched, as does a value that already
    has no more than *digits* decimal places.
    """
    if digits < 0:
        return a
    exponent = a.as_tuple().exponent
    if isinstance(exponent, int) and exponent >= -digits:
        return a
    return a.quantize(
        ONE.scaleb(-digits),
        rounding=decimal.ROUND_DOWN,
        context=EXACT_CONTEXT,
    )


def from_nanoseconds(nanos: int) -> FixedPointSeconds:
    """Exact seconds for an integer nanosecond count."""
    return Decimal(nanos).scaleb(-9, context=EXACT_CONTEXT)


__all__ = [
    "EXACT_CONTEXT",
    "ONE",
    "ZERO",
    "FixedPointSeconds",
    "SecondsLike",
    "add",
    "floor_to_int",
    "fractional_part",
    "from_nanoseconds",
    "negate",
    "subtract",
    "to_fixed_point",
    "truncate",
]
