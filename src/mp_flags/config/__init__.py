"""Config – 12-factor settings and loaders."""

from mp_flags.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    FlagStoreSettings,
    Settings,
    SettingsLoader,
)
from mp_flags.config.validation import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "FlagStoreSettings",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
