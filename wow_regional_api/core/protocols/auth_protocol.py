"""
Auth Protocol Definition

Protocol for request credential providers.
"""

from typing import Protocol, runtime_checkable

from ..models import SelectedRegion


@runtime_checkable
class AuthProtocol(Protocol):
    """Protocol for supplying the credential embedded in request URLs."""

    mode: str

    def get_credential(self, region: SelectedRegion) -> str:
        """
        Get the credential for a request against a region.

        Args:
            region: The region the request targets

        Returns:
            API key or access token
        """
        ...
