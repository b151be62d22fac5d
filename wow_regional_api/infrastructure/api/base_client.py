"""
Base API Client

Blocking HTTP transport shared by the regional client and its OAuth service.
"""

import logging
from typing import Optional, Dict, Any

import httpx

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)


class BaseAPIClient:
    """Thin synchronous wrapper around ``httpx.Client``."""

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.Client] = None
    ):
        """
        Initialize base API client.

        Args:
            timeout: Request timeout in seconds
            client: Preconfigured httpx client (the caller keeps ownership)
        """
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    def __enter__(self):
        """Enter context."""
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context."""
        self.close()

    def initialize(self) -> None:
        """Initialize HTTP client."""
        if not self._client:
            self._client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                headers=self._get_default_headers()
            )
            self._owns_client = True
            logger.debug("HTTP client initialized")

    def close(self) -> None:
        """Close HTTP client."""
        if self._client and self._owns_client:
            self._client.close()
            self._client = None
            logger.debug("HTTP client closed")

    def _get_default_headers(self) -> Dict[str, str]:
        """Get default headers for requests."""
        return {"Accept": "application/json"}

    def _make_request(
        self,
        method: str,
        url: str,
        **kwargs
    ) -> httpx.Response:
        """
        Make HTTP request.

        Args:
            method: HTTP method
            url: Absolute request URL
            **kwargs: Additional request arguments

        Returns:
            HTTP response

        Raises:
            TransportError: On network failure
        """
        if not self._client:
            self.initialize()

        logger.debug(f"{method} {self._redact(url)}")

        try:
            return self._client.request(method=method, url=url, **kwargs)
        except httpx.HTTPError as e:
            raise TransportError(
                f"{method} request failed: {e}",
                url=self._redact(url),
                original_exception=e
            )

    def _check_status(self, response: httpx.Response, url: str) -> None:
        """Raise TransportError for 4xx/5xx responses."""
        if response.is_error:
            raise TransportError(
                f"HTTP {response.status_code} from API",
                status_code=response.status_code,
                url=self._redact(url)
            )

    def get_json(self, url: str) -> Any:
        """
        Make GET request and decode the JSON body.

        An empty body decodes to None.
        """
        response = self._make_request("GET", url)
        self._check_status(response, url)
        return self._decode_json(response, url)

    def get_bytes(self, url: str) -> bytes:
        """Make GET request and return the raw body."""
        response = self._make_request("GET", url)
        self._check_status(response, url)
        return response.content

    def post_form(
        self,
        url: str,
        data: Dict[str, Any]
    ) -> httpx.Response:
        """Make form-encoded POST request."""
        return self._make_request("POST", url, data=data)

    def _decode_json(self, response: httpx.Response, url: str) -> Any:
        """Decode a JSON body, mapping an empty body to None."""
        if not response.content.strip():
            return None

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                "Response is not valid JSON",
                status_code=response.status_code,
                url=self._redact(url),
                original_exception=e
            )

    @staticmethod
    def _redact(url: str) -> str:
        """Hide credentials embedded in a URL's query string."""
        parsed = httpx.URL(url)
        for key in ("apikey", "access_token"):
            if key in parsed.params:
                parsed = parsed.copy_set_param(key, "***")
        return str(parsed)
