"""
Base Exception Classes

Core exception hierarchy for the regional API client.
"""

from typing import Optional, Dict, Any


class RegionalAPIError(Exception):
    """Base exception for all client errors."""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(RegionalAPIError):
    """Configuration or region data could not be loaded."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.config_key = config_key

        # Add to details
        self.details["config_key"] = config_key


class RegionError(RegionalAPIError):
    """Selected region is not part of the loaded region set."""

    def __init__(
        self,
        region_id: Any,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"Unknown region: {region_id}"
        super().__init__(message, details)
        self.region_id = region_id

        self.details["region_id"] = str(region_id)


class TransportError(RegionalAPIError):
    """Network failure, HTTP error status or unusable response body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.status_code = status_code
        self.url = url

        # Add to details
        self.details["status_code"] = status_code
        self.details["url"] = url


class AuthenticationError(RegionalAPIError):
    """OAuth token could not be obtained."""

    def __init__(
        self,
        message: str,
        token_url: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.token_url = token_url

        self.details["token_url"] = token_url


class CacheError(RegionalAPIError):
    """Reading or writing a file on disk failed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        super().__init__(message, details, original_exception)
        self.path = path

        self.details["path"] = path
