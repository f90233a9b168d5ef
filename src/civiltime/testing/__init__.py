"""Testing support – deterministic clocks and property-based generators.

Hypothesis is only imported when a strategy is built, so importing this
package does not require it.
"""

from civiltime.kernel.time.clock import FrozenClock
from civiltime.testing.generators import (
    StepClock,
    civil_strategy,
    date_strategy,
    seconds_strategy,
    utc_strategy,
    zone_offset_strategy,
)

__all__ = [
    "FrozenClock",
    "StepClock",
    "civil_strategy",
    "date_strategy",
    "seconds_strategy",
    "utc_strategy",
    "zone_offset_strategy",
]
