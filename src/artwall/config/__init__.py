"""
Configuration package for artwall.

Exports all config classes and the in-memory wallpaper state.
"""

from .dataclasses import (
    BusConfig,
    HttpConfig,
    CacheConfig,
    LoggingConfig,
)
from .main import Config
from .state import WallpaperState
from ..exceptions import ConfigError, ConfigValidationError

__all__ = [
    "Config",
    "BusConfig",
    "HttpConfig",
    "CacheConfig",
    "LoggingConfig",
    "WallpaperState",
    "ConfigError",
    "ConfigValidationError",
]
