"""Wallpaper management module."""

from .applier import PlasmaWallpaperApplier

__all__ = ["PlasmaWallpaperApplier"]
