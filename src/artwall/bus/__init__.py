"""Session bus access: transport, player presence and track metadata."""

from .transport import SessionBus
from .presence import PresenceDetector
from .metadata import TrackIdentity, parse_track_identity, read_metadata

__all__ = [
    "SessionBus",
    "PresenceDetector",
    "TrackIdentity",
    "parse_track_identity",
    "read_metadata",
]
