"""Config settings – 12-factor env-based configuration."""
from mp_middleware.config.settings.base import Settings
from mp_middleware.config.settings.dispatcher import DispatcherSettings
from mp_middleware.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DispatcherSettings", "DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
