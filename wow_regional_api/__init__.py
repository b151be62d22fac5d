"""
WoW Regional API

Region-aware World of Warcraft API client with realm and character caching.
"""

__version__ = "1.0.0"

# Public API exports
from .core.config import ClientSettings, ConfigLoader
from .core.exceptions import (
    RegionalAPIError,
    ConfigurationError,
    RegionError,
    TransportError,
    AuthenticationError,
    CacheError,
)
from .infrastructure.api.blizzard import RegionalAPIClient
from .utils.logging_utils import setup_logging

__all__ = [
    "RegionalAPIClient",
    "ClientSettings",
    "ConfigLoader",
    "RegionalAPIError",
    "ConfigurationError",
    "RegionError",
    "TransportError",
    "AuthenticationError",
    "CacheError",
    "setup_logging",
]
