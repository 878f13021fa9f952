"""Configuration for tmdbkit clients."""

from tmdbkit.config.settings import TMDbSettings, get_settings

__all__ = ["TMDbSettings", "get_settings"]
