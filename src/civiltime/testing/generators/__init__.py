"""Testing generators – deterministic clocks and Hypothesis strategies."""
from civiltime.testing.generators.step_clock import StepClock
from civiltime.testing.generators.strategies import (
    civil_strategy,
    date_strategy,
    seconds_strategy,
    utc_strategy,
    zone_offset_strategy,
)

__all__ = [
    "StepClock",
    "civil_strategy",
    "date_strategy",
    "seconds_strategy",
    "utc_strategy",
    "zone_offset_strategy",
]
