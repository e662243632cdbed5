"""
Metadata resolver.

Turns the player's current track into a local artwork file:
metadata -> track URL -> oEmbed thumbnail URL -> cache hit or download.
"""

import logging

from ..bus.metadata import parse_track_identity, read_metadata
from ..bus.transport import SessionBus
from ..constants import PLAYER_SERVICE
from ..exceptions import ArtworkError, BusError, MetadataError
from .cache import ArtworkCache
from .oembed import OEmbedClient
from .reference import ArtworkReference


class MetadataResolver:
    """
    Resolves the playing track to an ArtworkReference.
    
    Every failure (bus, metadata shape, lookup, download) degrades to the
    default artwork reference; resolve() never raises an artwall error.
    """
    
    def __init__(self, cache: ArtworkCache, oembed: OEmbedClient,
                 player_service: str = PLAYER_SERVICE) -> None:
        self.cache = cache
        self.oembed = oembed
        self.player_service = player_service
        self.logger = logging.getLogger(__name__)
    
    @property
    def default_reference(self) -> ArtworkReference:
        return self.cache.default_reference
    
    def resolve(self, bus: SessionBus) -> ArtworkReference:
        """
        Resolve the current track's artwork.
        
        Args:
            bus: Connected session bus
            
        Returns:
            Reference to the cached artwork, or the default reference
        """
        try:
            metadata = read_metadata(bus, self.player_service)
        except BusError as e:
            self.logger.warning(f"Cannot read player metadata: {e}")
            return self.default_reference
        
        try:
            identity = parse_track_identity(metadata)
        except MetadataError as e:
            self.logger.warning(f"Unusable player metadata: {e}")
            return self.default_reference
        
        try:
            thumbnail = self.oembed.thumbnail_url(identity.url)
            cached = self.cache.lookup(thumbnail)
        except ArtworkError as e:
            self.logger.warning(f"Cannot resolve artwork for {identity.url}: {e}")
            return self.default_reference
        
        if cached is not None:
            self.logger.debug(f"Cache hit for {thumbnail}: {cached.path}")
            return cached
        
        return self.cache.fetch_and_store(thumbnail, self.cache.local_path_for(thumbnail))
