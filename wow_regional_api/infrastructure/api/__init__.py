"""
API Infrastructure

HTTP transport and the Blizzard regional client.
"""

from .base_client import BaseAPIClient
from .blizzard import (
    RegionalAPIClient,
    BlizzardOAuthService,
    StaticKeyAuthenticator,
)

__all__ = [
    "BaseAPIClient",
    "RegionalAPIClient",
    "BlizzardOAuthService",
    "StaticKeyAuthenticator",
]
