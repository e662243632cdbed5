"""Artwork lookup, caching and resolution."""

from .reference import ArtworkReference
from .cache import ArtworkCache
from .oembed import OEmbedClient, build_session
from .resolver import MetadataResolver

__all__ = [
    "ArtworkReference",
    "ArtworkCache",
    "OEmbedClient",
    "build_session",
    "MetadataResolver",
]
