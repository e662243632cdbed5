"""
Command-line interface for artwall.

Usage:
    artwall [options]

Keeps the KDE Plasma wallpaper in sync with the album art of the track
playing in Spotify, falling back to a default image when it is not running.
"""

import argparse
import logging
import signal
import sys
from pathlib import Path

from .bus import SessionBus
from .config import Config
from .exceptions import (
    ArtWallError,
    BusConnectionError,
    ConfigError,
)
from .poll_loop import PollLoop


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artwall",
        description="Sync the Plasma wallpaper with Spotify album art"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--interval",
        type=float,
        help="Seconds between polls (default: 5)"
    )
    parser.add_argument(
        "--cache-dir",
        type=Path,
        help="Artwork cache directory (default: ~/.local/share/wallpapers)"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single poll and exit"
    )
    return parser


def main(argv=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)
    
    try:
        config = Config.load(
            poll_interval=args.interval,
            cache_dir=args.cache_dir,
            log_level="DEBUG" if args.verbose else None,
        )
        setup_logging(config.logging.level)
        
        bus = SessionBus.connect(config.bus)
        try:
            loop = PollLoop.from_config(config, bus)
            signal.signal(signal.SIGTERM, lambda signum, frame: loop.stop())
            loop.run(max_ticks=1 if args.once else None)
        finally:
            bus.close()
        
        return 0
    
    except KeyboardInterrupt:
        print("\nStopped by user", file=sys.stderr)
        return 130
    
    except ConfigError as e:
        print(f"\n❌ Configuration Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG
    
    except BusConnectionError as e:
        print(f"\n❌ Cannot Connect to Session Bus\n", file=sys.stderr)
        print(str(e), file=sys.stderr)
        print("\nMake sure you are running inside a desktop session.", file=sys.stderr)
        return 69  # EX_UNAVAILABLE
    
    except ArtWallError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        logger.error(str(e))
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
