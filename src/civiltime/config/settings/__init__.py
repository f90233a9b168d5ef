"""Config settings – 12-factor env-based configuration."""
from civiltime.config.settings.base import Settings
from civiltime.config.settings.civil_time import CivilTimeSettings, load_settings
from civiltime.config.settings.factory import SettingsFactory
from civiltime.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = [
    "CivilTimeSettings",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
