"""
Configuration Management

Settings and file-based configuration for the client.
"""

from .settings import ClientSettings
from .loader import ConfigLoader

__all__ = [
    "ClientSettings",
    "ConfigLoader",
]
