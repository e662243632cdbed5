"""
Poll loop: detect player, resolve artwork, apply when changed.

One tick runs the whole cycle synchronously; ticks never overlap and the
only deliberate wait is the fixed interval between them.
"""

import logging
import threading
from enum import Enum
from typing import Optional

from .artwork import ArtworkCache, MetadataResolver, OEmbedClient, build_session
from .artwork.reference import ArtworkReference
from .bus import PresenceDetector, SessionBus
from .config import Config, WallpaperState
from .exceptions import ArtWallError
from .wallpaper import PlasmaWallpaperApplier

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    """Result of a single poll tick."""
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class PollLoop:
    """
    Drives the poll-detect-resolve-apply cycle.
    
    Usage:
        loop = PollLoop.from_config(config, bus)
        loop.run()           # forever, until stop() or Ctrl-C
        loop.run(max_ticks=1)
    """
    
    def __init__(
        self,
        bus: SessionBus,
        detector: PresenceDetector,
        resolver: MetadataResolver,
        applier: PlasmaWallpaperApplier,
        state: WallpaperState,
        interval: float = 5.0,
    ) -> None:
        self.bus = bus
        self.detector = detector
        self.resolver = resolver
        self.applier = applier
        self.state = state
        self.interval = interval
        self._stop_event = threading.Event()
    
    @classmethod
    def from_config(cls, config: Config, bus: SessionBus) -> 'PollLoop':
        """Wire up all components from configuration."""
        session = build_session(config.http)
        cache = ArtworkCache(config.cache, config.http, session)
        resolver = MetadataResolver(
            cache, OEmbedClient(config.http, session), config.bus.player_service
        )
        return cls(
            bus=bus,
            detector=PresenceDetector(config.bus.player_service),
            resolver=resolver,
            applier=PlasmaWallpaperApplier(service=config.bus.shell_service),
            state=WallpaperState.initial(cache.default_reference),
            interval=config.poll_interval,
        )
    
    @property
    def default_reference(self) -> ArtworkReference:
        return self.resolver.default_reference
    
    def tick(self) -> TickOutcome:
        """
        Run one full cycle.
        
        Returns:
            APPLIED if the wallpaper was changed, UNCHANGED if nothing needed
            doing, FAILED if the shell rejected the change
        """
        if self.detector.is_present(self.bus):
            self.state.current = self.resolver.resolve(self.bus)
        else:
            self.state.current = self.default_reference
        
        if not self.state.needs_apply:
            logger.debug(f"Wallpaper unchanged: {self.state.current}")
            return TickOutcome.UNCHANGED
        
        logger.info(f"Changing wallpaper to {self.state.current}")
        if self.applier.apply(self.bus, self.state.current, self.state):
            return TickOutcome.APPLIED
        return TickOutcome.FAILED
    
    def run(self, max_ticks: Optional[int] = None) -> int:
        """
        Tick until stopped.
        
        Args:
            max_ticks: Stop after this many ticks (None = forever)
            
        Returns:
            Number of ticks run
        """
        self._stop_event.clear()
        ticks = 0
        logger.info(f"Polling every {self.interval}s")
        
        while not self._stop_event.is_set():
            try:
                self.tick()
            except ArtWallError as e:
                logger.error(f"Poll tick failed: {e}")
            ticks += 1
            
            if max_ticks is not None and ticks >= max_ticks:
                break
            self._stop_event.wait(self.interval)
        
        logger.debug(f"Poll loop stopped after {ticks} ticks")
        return ticks
    
    def stop(self) -> None:
        """Ask run() to return after the current tick."""
        self._stop_event.set()
