"""
Common exception classes for artwall.

Provides domain-specific exceptions for consistent error handling across modules.
All exceptions inherit from ArtWallError so the poll loop can catch them with
a single except clause and keep running.
"""


class ArtWallError(Exception):
    """
    Base exception for all artwall errors.
    
    All domain-specific exceptions inherit from this class, allowing
    callers to catch all artwall errors with a single except clause.
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(ArtWallError):
    """Configuration-related errors."""
    pass


class ConfigValidationError(ConfigError):
    """
    Config value validation failed.
    
    Raised when a value is present but invalid (e.g., non-positive
    interval, unknown log level, template without a placeholder).
    """
    pass


# ============================================================================
# Session Bus Errors
# ============================================================================

class BusError(ArtWallError):
    """
    Session bus communication errors.
    
    Base class for everything that goes wrong while talking to D-Bus.
    """
    pass


class BusConnectionError(BusError):
    """
    Cannot connect to the session bus.
    
    Raised at startup when DBUS_SESSION_BUS_ADDRESS is missing or the
    bus daemon is unreachable. This is the only fatal error.
    """
    pass


class BusCallError(BusError):
    """
    A method call or property read on the bus failed.
    
    Raised when the remote service is gone, rejects the call or
    returns a D-Bus error reply.
    """
    pass


class BusTimeoutError(BusCallError):
    """A bus call did not get a reply within the configured timeout."""
    pass


# ============================================================================
# Track Metadata Errors
# ============================================================================

class MetadataError(ArtWallError):
    """
    Player metadata has an unexpected shape.
    
    Raised when the Metadata property is not a mapping, lacks the
    xesam:url key, or holds a value that is not a non-empty string.
    """
    pass


# ============================================================================
# Artwork Errors
# ============================================================================

class ArtworkError(ArtWallError):
    """
    Artwork resolution errors.
    
    Base class for errors while turning a track URL into a local image.
    """
    pass


class ArtworkLookupError(ArtworkError):
    """
    oEmbed lookup failed.
    
    Raised for HTTP errors, timeouts, non-JSON bodies or a missing
    thumbnail_url field.
    """
    pass


class ArtworkFetchError(ArtworkError):
    """Downloading the thumbnail image failed."""
    pass


class ArtworkCacheError(ArtworkError):
    """
    Cache directory or cache file could not be written.
    
    Also raised when a thumbnail URL has no usable last path segment.
    """
    pass


# ============================================================================
# Wallpaper Errors
# ============================================================================

class ApplyError(ArtWallError):
    """
    Desktop shell rejected or failed the wallpaper script.
    
    Non-fatal: the next tick retries the apply.
    """
    pass
