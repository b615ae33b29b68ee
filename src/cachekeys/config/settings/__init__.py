"""Config settings – 12-factor env-based configuration."""
from cachekeys.config.settings.cache_keys import CacheKeySettings
from cachekeys.config.settings.loaders import EnvSettingsLoader, Settings, SettingsLoader

__all__ = ["CacheKeySettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
