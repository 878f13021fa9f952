"""tmdbkit Shared Module.

This package contains error handling, logging, locale helpers, constants and
response conversion used across tmdbkit.
"""

__all__ = ["constants", "conversion", "errors", "locales", "logging", "protocols"]
