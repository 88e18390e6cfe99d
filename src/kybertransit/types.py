"""Type definitions for Kyber Transit."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_KEM_SCHEME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_SERVER_HOST,
    DEFAULT_SHUTDOWN_TIMEOUT_S,
    DEFAULT_TIMEOUT_MS,
)


@dataclass
class EncryptResult:
    """Encrypt response returned by the transit API.

    Attributes:
        ciphertext: Base64-encoded KEM capsule.
        encdata: Base64-encoded masked plaintext.
    """

    ciphertext: str
    encdata: str


@dataclass
class ServerConfig:
    """Configuration for the transit server.

    Attributes:
        port: TCP port to listen on.
        host: Interface to bind.
        kem_scheme: Name of the KEM scheme used for new key pairs.
        log_level: Logging level name.
        shutdown_timeout: Graceful shutdown window in seconds.
    """

    port: int = 8080
    host: str = DEFAULT_SERVER_HOST
    kem_scheme: str = DEFAULT_KEM_SCHEME
    log_level: str = DEFAULT_LOG_LEVEL
    shutdown_timeout: float = DEFAULT_SHUTDOWN_TIMEOUT_S

    @property
    def address(self) -> str:
        """Listen address in ``:PORT`` form."""
        return f":{self.port}"


@dataclass
class ClientConfig:
    """Configuration for TransitApiClient.

    Attributes:
        base_url: Base URL for the transit server.
        timeout: HTTP request timeout in milliseconds.
        max_retries: Maximum number of retry attempts.
        retry_delay: Initial retry delay in milliseconds.
        retry_on_status_codes: HTTP status codes to retry on.
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT_MS
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: int = DEFAULT_RETRY_DELAY_MS
    retry_on_status_codes: tuple[int, ...] = DEFAULT_RETRY_STATUS_CODES
