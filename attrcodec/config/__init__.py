"""Configuration module for attrcodec."""

from .codec import JsonCodecSettings
from .hook import SerializeHookConfig
from .logging import LoggingSettings
from .settings import ConfigurationError, Settings, get_settings


__all__ = [
    "ConfigurationError",
    "JsonCodecSettings",
    "LoggingSettings",
    "SerializeHookConfig",
    "Settings",
    "get_settings",
]
