"""
Track metadata from the MPRIS player.

The Metadata property is an a{sv} dictionary whose values are dynamically
typed, so it is parsed into a TrackIdentity by a fallible step that raises
MetadataError on any shape mismatch.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..constants import (
    PLAYER_SERVICE,
    PLAYER_PATH,
    PLAYER_INTERFACE,
    PLAYER_METADATA_PROPERTY,
    PLAYER_METADATA_URL_KEY,
)
from ..exceptions import MetadataError
from .transport import SessionBus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackIdentity:
    """Identifying URL of the playing track (e.g. https://open.spotify.com/track/...)."""
    url: str


def parse_track_identity(metadata: Any) -> TrackIdentity:
    """
    Extract the track URL from an MPRIS metadata dictionary.
    
    Args:
        metadata: Value of org.mpris.MediaPlayer2.Player.Metadata
        
    Returns:
        TrackIdentity for the xesam:url entry
        
    Raises:
        MetadataError: If metadata is not a mapping or xesam:url is missing,
            not a string, or empty
    """
    if not isinstance(metadata, Mapping):
        raise MetadataError(f"Metadata is {type(metadata).__name__}, expected a dictionary")
    
    if PLAYER_METADATA_URL_KEY not in metadata:
        raise MetadataError(f"Metadata has no {PLAYER_METADATA_URL_KEY} entry")
    
    value = metadata[PLAYER_METADATA_URL_KEY]
    if not isinstance(value, str):
        raise MetadataError(
            f"{PLAYER_METADATA_URL_KEY} is {type(value).__name__}, expected a string"
        )
    
    url = str(value).strip()
    if not url:
        raise MetadataError(f"{PLAYER_METADATA_URL_KEY} is empty")
    
    return TrackIdentity(url=url)


def read_metadata(bus: SessionBus, service: str = PLAYER_SERVICE) -> Any:
    """
    Read the raw Metadata property from the player owning service.
    
    Raises:
        BusCallError: If the player does not answer
    """
    return bus.get_property(
        service, PLAYER_PATH, PLAYER_INTERFACE, PLAYER_METADATA_PROPERTY
    )
