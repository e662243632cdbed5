"""
artwall - Spotify album art as your Plasma wallpaper.

Polls the session bus for Spotify, resolves the playing track's artwork via
oEmbed, caches it locally and applies it to every Plasma desktop.
"""

__version__ = "0.1.0"

from .config import Config, WallpaperState
from .artwork import ArtworkReference, ArtworkCache, MetadataResolver, OEmbedClient
from .bus import SessionBus, PresenceDetector, TrackIdentity, parse_track_identity
from .wallpaper import PlasmaWallpaperApplier
from .poll_loop import PollLoop, TickOutcome

__all__ = [
    "Config",
    "WallpaperState",
    "ArtworkReference",
    "ArtworkCache",
    "MetadataResolver",
    "OEmbedClient",
    "SessionBus",
    "PresenceDetector",
    "TrackIdentity",
    "parse_track_identity",
    "PlasmaWallpaperApplier",
    "PollLoop",
    "TickOutcome",
]
