"""
civiltime – civil-calendar and UTC time engine.

Import path convention::

    from civiltime import api
    from civiltime.kernel.time import Civil, Date, Utc, ZoneOffset
    from civiltime.kernel.errors import FormatError, InvalidDateError
    from civiltime.config import load_settings
"""

from civiltime.kernel.errors import FormatError, InvalidDateError
from civiltime.kernel.time import (
    Civil,
    ClockSource,
    Date,
    DayOfWeek,
    Utc,
    ZoneOffset,
)

__version__ = "0.1.0"
__all__ = [
    "Civil",
    "ClockSource",
    "Date",
    "DayOfWeek",
    "FormatError",
    "InvalidDateError",
    "Utc",
    "ZoneOffset",
    "__version__",
]
