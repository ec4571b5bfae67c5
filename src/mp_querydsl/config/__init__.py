"""Config – encoder settings and their 12-factor loaders."""

from mp_querydsl.config.settings import (
    DotenvSettingsLoader,
    EncoderSettings,
    EnvSettingsLoader,
    Settings,
    SettingsLoader,
)
from mp_querydsl.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EncoderSettings",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
