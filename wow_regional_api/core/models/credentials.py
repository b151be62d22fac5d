"""
Credential Models

API credentials read from the configuration file.
"""

from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class StaticKeyCredentials(BaseModel):
    """Single API key embedded in every request URL."""

    mode: ClassVar[str] = "key"

    key: StrictStr

    model_config = ConfigDict(frozen=True)


class OAuthCredentials(BaseModel):
    """Client key/secret pair exchanged for bearer tokens."""

    mode: ClassVar[str] = "oauth"

    client_key: StrictStr = Field(alias="clientKey")
    client_secret: StrictStr = Field(alias="clientSecret")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __repr__(self) -> str:
        return f"OAuthCredentials(client_key={self.client_key!r}, client_secret='***')"


Credentials = Union[StaticKeyCredentials, OAuthCredentials]
