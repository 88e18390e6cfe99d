"""HTTP client with retry logic for the Kyber Transit API."""

from __future__ import annotations

import asyncio
import json
from typing import Any, cast
from urllib.parse import quote

import httpx

from ..errors import ApiError, KeyAlreadyExistsError, KeyNotFoundError, NetworkError
from ..types import ClientConfig, EncryptResult


def encode_path_segment(value: str) -> str:
    """URL-encode a path segment for use in API URLs.

    Args:
        value: The value to encode.

    Returns:
        URL-encoded string safe for use in URL paths.
    """
    return quote(value, safe="")


class TransitApiClient:
    """Async client for the transit API with automatic retry logic.

    Attributes:
        config: Client configuration.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the API client.

        Args:
            config: Client configuration. Defaults to ``ClientConfig()``.
            transport: Optional httpx transport, e.g. ``httpx.ASGITransport``
                to talk to an in-process application.
        """
        self.config = config if config is not None else ClientConfig()
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> TransitApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client.

        Returns:
            The HTTP client instance.
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                headers={"Content-Type": "application/json"},
                timeout=httpx.Timeout(self.config.timeout / 1000),
                transport=self._transport,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> httpx.Response:
        """Make an HTTP request with retry logic.

        Args:
            method: HTTP method (GET, POST).
            path: API path.
            json: JSON body for the request.

        Returns:
            The HTTP response.

        Raises:
            KeyNotFoundError: If the named key does not exist.
            KeyAlreadyExistsError: If the named key already exists.
            ApiError: For other error responses.
            NetworkError: If there's a network communication failure.
        """
        client = await self._get_client()
        last_error: Exception | None = None

        for attempt in range(self.config.max_retries + 1):
            try:
                response = await client.request(method, path, json=json)

                if (
                    response.status_code in self.config.retry_on_status_codes
                    and attempt < self.config.max_retries
                ):
                    delay = self.config.retry_delay * (2**attempt) / 1000
                    await asyncio.sleep(delay)
                    continue

                if response.status_code >= 400:
                    self._handle_error_response(response)

                return response

            except (httpx.ConnectError, httpx.TimeoutException, httpx.NetworkError) as e:
                last_error = e
                if attempt < self.config.max_retries:
                    delay = self.config.retry_delay * (2**attempt) / 1000
                    await asyncio.sleep(delay)
                    continue
                raise NetworkError(f"Network error: {e}") from e

        raise NetworkError(
            f"Request failed after {self.config.max_retries} retries"
        ) from last_error  # pragma: no cover

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Handle HTTP error responses.

        Args:
            response: The HTTP response.

        Raises:
            KeyNotFoundError: On 404.
            KeyAlreadyExistsError: On 409.
            ApiError: For other API errors.
        """
        try:
            data = response.json()
            message = data.get("error", response.text)
        except (ValueError, json.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {response.status_code}"

        if response.status_code == 404:
            raise KeyNotFoundError(message)
        if response.status_code == 409:
            raise KeyAlreadyExistsError(message)
        raise ApiError(response.status_code, message)

    async def create_key(self, name: str) -> str:
        """Create a named key pair on the server.

        Args:
            name: The key name.

        Returns:
            The base64-encoded public key.

        Raises:
            KeyAlreadyExistsError: If the name is already taken.
        """
        response = await self._request("POST", f"/transit/keys/{encode_path_segment(name)}")
        return cast(str, response.json()["public_key"])

    async def encrypt(self, name: str, plaintext: str) -> EncryptResult:
        """Seal plaintext under a named key.

        Args:
            name: The key name.
            plaintext: UTF-8 text to seal. Must not be empty.

        Returns:
            The base64-encoded ciphertext and encdata.
        """
        response = await self._request(
            "POST",
            f"/transit/encrypt/{encode_path_segment(name)}",
            json={"plaintext": plaintext},
        )
        data = response.json()
        return EncryptResult(ciphertext=data["ciphertext"], encdata=data["encdata"])

    async def decrypt(self, name: str, ciphertext: str, encdata: str) -> str:
        """Unseal a ciphertext/encdata pair under a named key.

        Args:
            name: The key name.
            ciphertext: Base64-encoded capsule from ``encrypt``.
            encdata: Base64-encoded masked data from ``encrypt``.

        Returns:
            The recovered plaintext.
        """
        response = await self._request(
            "POST",
            f"/transit/decrypt/{encode_path_segment(name)}",
            json={"ciphertext": ciphertext, "encdata": encdata},
        )
        return cast(str, response.json()["plaintext"])

    async def health(self) -> bool:
        """Check server liveness.

        Returns:
            True if the server answered ``ok``.
        """
        response = await self._request("GET", "/health")
        return response.text == "ok"
