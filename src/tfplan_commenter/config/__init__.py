"""Settings loading for tfplan-commenter."""

from tfplan_commenter.config.loader import DEFAULT_SETTINGS_FILE, ConfigError, load_settings
from tfplan_commenter.config.settings import LOG_ENV_VAR, CommenterSettings, LoggingSettings

__all__ = [
    "DEFAULT_SETTINGS_FILE",
    "LOG_ENV_VAR",
    "CommenterSettings",
    "ConfigError",
    "LoggingSettings",
    "load_settings",
]
