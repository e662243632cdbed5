"""Detects whether the media player owns its well-known name on the bus."""

import logging

from ..constants import PLAYER_SERVICE
from ..exceptions import BusError
from .transport import SessionBus


class PresenceDetector:
    """
    Checks the bus name list for the player service.
    
    A failing bus query is reported as "player absent" so that a hiccup in
    the desktop session never stops the poll loop.
    """
    
    def __init__(self, service_name: str = PLAYER_SERVICE) -> None:
        self.service_name = service_name
        self.logger = logging.getLogger(__name__)
    
    def is_present(self, bus: SessionBus) -> bool:
        """
        Return True iff the player service name is currently owned.
        
        Args:
            bus: Connected session bus
        """
        try:
            names = bus.list_names()
        except BusError as e:
            self.logger.warning(f"Cannot list bus names, treating player as absent: {e}")
            return False
        
        present = self.service_name in names
        self.logger.debug(f"{self.service_name} present: {present}")
        return present
