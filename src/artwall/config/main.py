"""
Main Config class for artwall.

There is no config file: defaults come from the dataclasses and the CLI
may override a handful of values through Config.load().
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ..exceptions import ConfigValidationError

from .dataclasses import (
    BusConfig,
    HttpConfig,
    CacheConfig,
    LoggingConfig,
)

VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class Config:
    """
    Main configuration class for artwall.
    
    Groups the per-concern sections and validates them once on creation,
    so components can trust the values they receive.
    """
    
    poll_interval: float = 5.0
    bus: BusConfig = field(default_factory=BusConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    
    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.poll_interval <= 0:
            raise ConfigValidationError(
                f"Poll interval ({self.poll_interval}s) must be positive."
            )
        
        if self.bus.call_timeout <= 0:
            raise ConfigValidationError(
                f"Bus call timeout ({self.bus.call_timeout}s) must be positive."
            )
        
        if not self.bus.player_service or not self.bus.shell_service:
            raise ConfigValidationError(
                f"Bus service names must not be empty (player={self.bus.player_service!r}, "
                f"shell={self.bus.shell_service!r})."
            )
        
        if self.http.lookup_timeout <= 0 or self.http.download_timeout <= 0:
            raise ConfigValidationError(
                f"HTTP timeouts (lookup={self.http.lookup_timeout}s, "
                f"download={self.http.download_timeout}s) must be positive."
            )
        
        if self.http.chunk_size <= 0:
            raise ConfigValidationError(
                f"Download chunk size ({self.http.chunk_size}) must be positive."
            )
        
        if "{url}" not in self.http.oembed_template:
            raise ConfigValidationError(
                f"oEmbed template has no {{url}} placeholder: {self.http.oembed_template}"
            )
        
        if not self.cache.default_name or "/" in self.cache.default_name:
            raise ConfigValidationError(
                f"Invalid default artwork name: {self.cache.default_name!r}"
            )
        
        if self.logging.level.upper() not in VALID_LOG_LEVELS:
            raise ConfigValidationError(
                f"Invalid log level: {self.logging.level}\n"
                f"Must be one of: {VALID_LOG_LEVELS}"
            )
    
    @classmethod
    def load(
        cls,
        poll_interval: Optional[float] = None,
        cache_dir: Optional[Path] = None,
        log_level: Optional[str] = None,
    ) -> 'Config':
        """
        Build configuration from defaults plus optional overrides.
        
        Args:
            poll_interval: Seconds between poll ticks
            cache_dir: Directory for cached artwork and the default image
            log_level: Logging level name
            
        Returns:
            Validated Config instance
            
        Raises:
            ConfigValidationError: If any value is out of range
        """
        kwargs = {}
        if poll_interval is not None:
            kwargs['poll_interval'] = poll_interval
        if cache_dir is not None:
            kwargs['cache'] = CacheConfig(directory=cache_dir)
        if log_level is not None:
            kwargs['logging'] = LoggingConfig(level=log_level)
        
        config = cls(**kwargs)
        logging.getLogger(__name__).debug(
            f"Loaded config: interval={config.poll_interval}s cache={config.cache.directory}"
        )
        return config
