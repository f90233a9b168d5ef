"""Kernel – framework-agnostic time engine: errors, Result and the time types."""

from civiltime.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    FormatError,
    InvalidDateError,
    InvariantViolationError,
    ValidationError,
)
from civiltime.kernel.types import Err, Ok, Result

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "Err",
    "FormatError",
    "InvalidDateError",
    "InvariantViolationError",
    "Ok",
    "Result",
    "ValidationError",
]
