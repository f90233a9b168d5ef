"""Domain errors — calendar rule and time-format violations."""

from __future__ import annotations

from typing import Any

from civiltime.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a time-domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A value type was constructed in a state its invariants forbid."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class FormatError(ValidationError):
    """Malformed timestamp text, a missing offset, or a value that has no
    RFC 3339 representation."""

    default_code = "format_error"

    def __init__(
        self,
        message: str,
        *,
        text: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.text = text
        if text is not None:
            self.detail.setdefault("text", text)


class InvalidDateError(ValidationError):
    """Year/month/day combination that does not exist in the Gregorian calendar."""

    default_code = "invalid_date"

    def __init__(
        self,
        year: int,
        month: int,
        day: int,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Invalid date {year:04d}-{month:02d}-{day:02d}",
            **kwargs,
        )
        self.year = year
        self.month = month
        self.day = day
        self.detail.setdefault("year", year)
        self.detail.setdefault("month", month)
        self.detail.setdefault("day", day)


__all__ = [
    "DomainError",
    "FormatError",
    "InvalidDateError",
    "InvariantViolationError",
    "ValidationError",
]
