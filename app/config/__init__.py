"""Configuration package for runtime settings and startup validation."""

from .settings import LOG_LEVELS, AppSettings, SettingsLoadError, config_load_settings

__all__ = ["AppSettings", "LOG_LEVELS", "SettingsLoadError", "config_load_settings"]
