"""
Core Exceptions

Base exception classes for the client.
"""

from .base import (
    RegionalAPIError,
    ConfigurationError,
    RegionError,
    TransportError,
    AuthenticationError,
    CacheError,
)

__all__ = [
    "RegionalAPIError",
    "ConfigurationError",
    "RegionError",
    "TransportError",
    "AuthenticationError",
    "CacheError",
]
