"""conftest.py for benchmarks.

Provides shared timestamp corpora so every benchmark in the session times
the same inputs.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from civiltime.kernel.time import Civil, Utc, ZoneOffset


@pytest.fixture(scope="session")
def utc_texts() -> list[str]:
    """A mix of Zulu, offset and high-precision timestamps."""
    return [
        "1970-01-01T00:00:00Z",
        "2007-12-03T10:15:30.00Z",
        "2021-04-12T23:20:50.52+05:30",
        "1996-12-19T16:39:57-08:00",
        "2026-10-19T08:00:00.123456789012Z",
        "1937-01-01T12:00:27.87+00:20",
    ]


@pytest.fixture(scope="session")
def sample_utc() -> Utc:
    return Utc(1_618_249_850, Decimal("0.52"))


@pytest.fixture(scope="session")
def sample_civil() -> Civil:
    return Civil(2021, 4, 12, 23, 20, Decimal("50.52"), ZoneOffset(5, 30))
