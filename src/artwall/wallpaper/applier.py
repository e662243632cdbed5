"""
Wallpaper applier for KDE Plasma.

Sets the wallpaper of every Plasma desktop by evaluating a desktop script
through org.kde.PlasmaShell.evaluateScript.
"""

import logging

from ..artwork.reference import ArtworkReference
from ..bus.transport import SessionBus
from ..config.state import WallpaperState
from ..constants import (
    PLASMA_SERVICE,
    PLASMA_PATH,
    PLASMA_INTERFACE,
    PLASMA_EVALUATE_METHOD,
    PLASMA_SCRIPT_TEMPLATE,
)
from ..exceptions import ApplyError, BusError


def _script_string(value: str) -> str:
    """Escape a value for use inside a double-quoted script string."""
    return value.replace('\\', '\\\\').replace('"', '\\"')


class PlasmaWallpaperApplier:
    """
    Applies artwork to all Plasma desktops with a fixed fill mode.
    
    The wallpaper state is only updated after the shell confirms the call,
    so a failed apply is retried on the next poll tick.
    """
    
    def __init__(self, script_template: str = PLASMA_SCRIPT_TEMPLATE,
                 service: str = PLASMA_SERVICE) -> None:
        self.script_template = script_template
        self.service = service
        self.logger = logging.getLogger(__name__)
    
    def build_script(self, reference: ArtworkReference) -> str:
        """Render the desktop script for a reference."""
        return self.script_template % _script_string(reference.uri)
    
    def evaluate(self, bus: SessionBus, reference: ArtworkReference) -> None:
        """
        Send the wallpaper script to the Plasma shell.
        
        Raises:
            ApplyError: If the shell is unreachable or rejects the script
        """
        script = self.build_script(reference)
        try:
            bus.call_method(
                self.service, PLASMA_PATH, PLASMA_INTERFACE, PLASMA_EVALUATE_METHOD, script
            )
        except BusError as e:
            raise ApplyError(f"Failed to change background to {reference}: {e}")
    
    def apply(self, bus: SessionBus, reference: ArtworkReference, state: WallpaperState) -> bool:
        """
        Apply a reference and record it in the state on success.
        
        Args:
            bus: Connected session bus
            reference: Artwork to show
            state: Wallpaper state owned by the poll loop
            
        Returns:
            True if the shell accepted the script
        """
        try:
            self.evaluate(bus, reference)
        except ApplyError as e:
            self.logger.error(str(e))
            return False
        
        state.mark_applied(reference)
        self.logger.debug(f"Applied wallpaper {reference}")
        return True
