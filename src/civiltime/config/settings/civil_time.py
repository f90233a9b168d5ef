"""Config settings – CivilTimeSettings, the library's own configuration."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from civiltime.config.settings.base import Settings
from civiltime.config.settings.factory import SettingsFactory
from civiltime.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from civiltime.config.validation import InvalidSettingValueError
from civiltime.kernel.time.constants import NANOS_DIGITS


@dataclasses.dataclass
class CivilTimeSettings(Settings):
    """Environment-driven defaults.

    ``CIVILTIME_PRECISION``
        Fraction digits kept by ``now()`` when the caller passes none.
        ``-1`` keeps the clock's full (nanosecond) precision.
    ``CIVILTIME_LOG_LEVEL``
        Level applied by :func:`~civiltime.observability.configure_logging`.
    ``CIVILTIME_LOG_JSON``
        Render log lines as JSON instead of key=value console output.
    """

    _prefix: ClassVar[str] = "CIVILTIME"

    precision: int = -1
    log_level: str = "WARNING"
    log_json: bool = False

    def _validate(self) -> None:
        if self.precision > NANOS_DIGITS:
            raise InvalidSettingValueError(
                "precision",
                self.precision,
                f"the system clock resolves at most {NANOS_DIGITS} digits",
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError(
                "log_level", self.log_level, "not a logging level name"
            )

    @property
    def clock_precision(self) -> int | None:
        """``precision`` as understood by ``ClockSource`` (``None`` = full)."""
        return None if self.precision < 0 else self.precision


def load_settings(
    loaders: list[SettingsLoader] | None = None,
    **overrides: object,
) -> CivilTimeSettings:
    """Build :class:`CivilTimeSettings` from *loaders* (environment by default)."""
    return SettingsFactory.create(
        CivilTimeSettings,
        loaders if loaders is not None else [EnvSettingsLoader()],
        overrides or None,
    )


__all__ = ["CivilTimeSettings", "load_settings"]
