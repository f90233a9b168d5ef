"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   └── ValidationError
    │       ├── FormatError
    │       └── InvalidDateError
    └── ApplicationError         (application.py)
"""

from civiltime.kernel.errors.application import ApplicationError
from civiltime.kernel.errors.base import BaseError
from civiltime.kernel.errors.domain import (
    DomainError,
    FormatError,
    InvalidDateError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "FormatError",
    "InvalidDateError",
    "InvariantViolationError",
    "ValidationError",
]
