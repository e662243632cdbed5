"""
Configuration dataclasses for artwall.

Every tunable value lives here with the default the daemon ships with.
"""

from pathlib import Path
from dataclasses import dataclass, field

from ..constants import OEMBED_URL_TEMPLATE, PLASMA_SERVICE, PLAYER_SERVICE


def _default_cache_dir() -> Path:
    return Path.home() / ".local" / "share" / "wallpapers"


@dataclass
class BusConfig:
    """Session bus settings."""
    player_service: str = PLAYER_SERVICE
    shell_service: str = PLASMA_SERVICE
    call_timeout: float = 5.0  # Seconds to wait for any D-Bus reply


@dataclass
class HttpConfig:
    """HTTP settings for the oEmbed lookup and image download."""
    oembed_template: str = OEMBED_URL_TEMPLATE
    lookup_timeout: int = 10
    download_timeout: int = 30
    chunk_size: int = 8192
    user_agent: str = "artwall/0.1.0"


@dataclass
class CacheConfig:
    """
    Local artwork cache.
    
    Downloaded thumbnails are stored as <directory>/<last URL segment>.
    The fallback image is <directory>/<default_name> and is expected to be
    put there by the user.
    """
    directory: Path = field(default_factory=_default_cache_dir)
    default_name: str = "default"
    
    def __post_init__(self) -> None:
        self.directory = Path(self.directory).expanduser().absolute()
    
    @property
    def default_path(self) -> Path:
        """Path of the fallback artwork file."""
        return self.directory / self.default_name


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
