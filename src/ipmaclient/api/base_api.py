"""
Base API client for the IPMA client.
"""

import json
import time
from typing import Any

import httpx

from ipmaclient.config.settings import ClientSettings
from ipmaclient.exceptions import InvalidResponseError
from ipmaclient.exceptions import handle_errors
from ipmaclient.utils.logging_utils import EnhancedLoggerMixin


class BaseAPI(EnhancedLoggerMixin):
    """Base class for async JSON API clients.

    Requests are issued once, without retries. Every failure leaving this
    class is one of the errors defined in ``ipmaclient.exceptions``.
    """

    DEFAULT_HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        settings: ClientSettings | None = None,
        client: httpx.AsyncClient | None = None
    ):
        """Initialize API client.

        Args:
            settings: Base URL, timeout and user agent to use
            client: Optional pre-configured HTTP client, owned by the caller
        """
        super().__init__()
        self.settings = settings or ClientSettings()
        self.base_url = self.settings.base_url.rstrip("/")
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.settings.timeout,
            headers={**self.DEFAULT_HEADERS, "User-Agent": self.settings.user_agent},
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "BaseAPI":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _validate_response(self, response: httpx.Response) -> None:
        """Raise ``httpx.HTTPStatusError`` for non-2xx responses."""
        response.raise_for_status()

    def _parse_response(self, response: httpx.Response) -> Any:
        """Parse response content as JSON.

        Raises:
            InvalidResponseError: If the body is not valid JSON
        """
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            content = response.text.strip()
            raise InvalidResponseError(
                f"Failed to parse response: {content[:100]}",
                status_code=response.status_code
            ) from e

    async def _get(self, endpoint: str, operation: str) -> Any:
        """Issue a GET request and return the parsed JSON body.

        Args:
            endpoint: Path relative to the base URL
            operation: Name used in logs and error details

        Returns:
            Parsed JSON body
        """
        start_time = time.perf_counter()
        url = f"{self.base_url}/{endpoint.lstrip('/')}"
        self.debug(f"GET {url}", operation=operation)

        with handle_errors(operation):
            response = await self.client.get(url)
            self._validate_response(response)
            result = self._parse_response(response)

        elapsed = time.perf_counter() - start_time
        self.debug(f"GET {url} completed in {elapsed:.2f}s", status=response.status_code)
        return result
