"""Config – 12-factor settings and their validation errors."""

from cachekeys.config.settings import CacheKeySettings, EnvSettingsLoader, Settings, SettingsLoader
from cachekeys.kernel.errors import ConfigError, InvalidSettingValueError, MissingRequiredSettingError

__all__ = [
    "CacheKeySettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
