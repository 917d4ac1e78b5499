"""Lighthouse configuration loading."""

from lighthouse.config.settings import (
    ConfigError,
    ExplorerSettings,
    LighthouseConfig,
    LoggingSettings,
    LogLevel,
    StorageSettings,
    default_config_file,
    load_config,
)

__all__ = [
    "ConfigError",
    "ExplorerSettings",
    "LighthouseConfig",
    "LogLevel",
    "LoggingSettings",
    "StorageSettings",
    "default_config_file",
    "load_config",
]
