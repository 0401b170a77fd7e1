"""Config – environment-driven settings for mp-access."""
from mp_access.config.settings import AccessSettings, EnvSettingsLoader, Settings, SettingsLoader
from mp_access.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "AccessSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "Settings",
    "SettingsLoader",
]
