"""
Blizzard Authentication

Credential providers for static API key and OAuth client-credentials mode.
"""

import logging

from pydantic import ValidationError

from ..base_client import BaseAPIClient
from .models import TokenResponse
from ....core.exceptions import AuthenticationError
from ....core.models import (
    Credentials,
    OAuthCredentials,
    SelectedRegion,
    StaticKeyCredentials,
)
from ....core.protocols import AuthProtocol

logger = logging.getLogger(__name__)


class StaticKeyAuthenticator(AuthProtocol):
    """Embeds a fixed API key in every request."""

    mode = "key"

    def __init__(self, key: str):
        self.key = key

    def get_credential(self, region: SelectedRegion) -> str:
        return self.key


class BlizzardOAuthService(AuthProtocol):
    """
    OAuth2 client-credentials flow against the region's token endpoint.

    A new token is requested for every API call; tokens are not cached.
    """

    mode = "oauth"

    def __init__(
        self,
        client_key: str,
        client_secret: str,
        transport: BaseAPIClient
    ):
        """
        Initialize OAuth service.

        Args:
            client_key: Blizzard API client ID
            client_secret: Blizzard API client secret
            transport: HTTP transport used for the token request
        """
        self.client_key = client_key
        self.client_secret = client_secret
        self.transport = transport

    def get_credential(self, region: SelectedRegion) -> str:
        return self.get_access_token(region.token_url)

    def get_access_token(self, token_url: str) -> str:
        """
        Request an access token.

        Args:
            token_url: Token endpoint of the selected region

        Returns:
            Bearer access token

        Raises:
            AuthenticationError: If the response has no access_token
            TransportError: On network failure
        """
        logger.info(f"Requesting OAuth token from {token_url}")

        response = self.transport.post_form(
            token_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self.client_key,
                "client_secret": self.client_secret
            }
        )

        try:
            token = TokenResponse.model_validate_json(response.content)
        except ValidationError as e:
            raise AuthenticationError(
                "Unable to obtain OAuth token from API",
                token_url=token_url,
                details={"status_code": response.status_code},
                original_exception=e
            )

        logger.debug(f"OAuth token obtained, expires in {token.expires_in} seconds")
        return token.access_token


def create_authenticator(
    credentials: Credentials,
    transport: BaseAPIClient
) -> AuthProtocol:
    """Build the credential provider matching the configured mode."""
    if isinstance(credentials, OAuthCredentials):
        return BlizzardOAuthService(
            client_key=credentials.client_key,
            client_secret=credentials.client_secret,
            transport=transport
        )
    if isinstance(credentials, StaticKeyCredentials):
        return StaticKeyAuthenticator(credentials.key)
    raise TypeError(f"Unsupported credentials: {type(credentials).__name__}")
