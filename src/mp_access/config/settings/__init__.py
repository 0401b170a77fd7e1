"""Config settings – 12-factor env-based configuration."""
from mp_access.config.settings.access import AccessSettings
from mp_access.config.settings.base import Settings
from mp_access.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["AccessSettings", "EnvSettingsLoader", "Settings", "SettingsLoader"]
