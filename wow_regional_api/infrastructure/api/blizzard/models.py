"""
Blizzard API Models

Pydantic models for the API responses the client inspects.
"""

from typing import Optional, List

from pydantic import BaseModel, ConfigDict


class Realm(BaseModel):
    """Realm entry of the realm status response."""
    slug: str
    name: str

    model_config = ConfigDict(extra="ignore")


class RealmStatus(BaseModel):
    """Realm status response."""
    realms: List[Realm]

    model_config = ConfigDict(extra="ignore")

    def to_mapping(self) -> dict:
        """Realm slug -> display name, in response order."""
        return {realm.slug: realm.name for realm in self.realms}


class TokenResponse(BaseModel):
    """OAuth token response."""
    access_token: str
    token_type: Optional[str] = None
    expires_in: Optional[int] = None

    model_config = ConfigDict(extra="ignore")
