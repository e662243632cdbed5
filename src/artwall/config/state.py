"""
In-memory wallpaper state.

Owned by the poll loop for the lifetime of the process; nothing is persisted.
"""

from dataclasses import dataclass

from ..artwork.reference import ArtworkReference


@dataclass
class WallpaperState:
    """
    What is on the desktop and what should be.
    
    Attributes:
        current: Best known reference as of the latest poll tick
        previous: Last reference the desktop shell confirmed applying
    """
    current: ArtworkReference
    previous: ArtworkReference
    
    @classmethod
    def initial(cls, default: ArtworkReference) -> 'WallpaperState':
        """Start with both fields at the default artwork."""
        return cls(current=default, previous=default)
    
    @property
    def needs_apply(self) -> bool:
        """True when current differs from what was last applied."""
        return self.current != self.previous
    
    def mark_applied(self, reference: ArtworkReference) -> None:
        """Record a confirmed-successful apply."""
        self.previous = reference
