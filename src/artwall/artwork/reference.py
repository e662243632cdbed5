"""Local artwork locator passed between resolver, loop and applier."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ArtworkReference:
    """
    Immutable pointer to an image file on local disk.
    
    Compared by value: two references are equal when they point at the same
    path, which is how the poll loop decides whether to re-apply.
    """
    path: Path
    
    @property
    def uri(self) -> str:
        """file:// locator understood by the desktop shell."""
        return f"file://{self.path}"
    
    def __str__(self) -> str:
        return self.uri
