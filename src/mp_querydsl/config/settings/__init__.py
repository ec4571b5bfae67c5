"""Config settings – 12-factor env-based configuration."""
from mp_querydsl.config.settings.base import Settings
from mp_querydsl.config.settings.encoder import EncoderSettings
from mp_querydsl.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EncoderSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
