"""
Blizzard API Infrastructure

Regional game-data API client, authentication and endpoint helpers.
"""

from .client import RegionalAPIClient
from .auth import BlizzardOAuthService, StaticKeyAuthenticator, create_authenticator
from .models import Realm, RealmStatus, TokenResponse

__all__ = [
    # Client
    "RegionalAPIClient",

    # Authentication
    "BlizzardOAuthService",
    "StaticKeyAuthenticator",
    "create_authenticator",

    # Models
    "Realm",
    "RealmStatus",
    "TokenResponse",
]
