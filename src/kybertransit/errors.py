"""Error hierarchy for Kyber Transit."""

from __future__ import annotations


class KyberTransitError(Exception):
    """Base exception for all Kyber Transit errors."""

    pass


class ConfigError(KyberTransitError):
    """Invalid or unsupported configuration value."""

    pass


class CryptoError(KyberTransitError):
    """Base exception for KEM engine failures."""

    pass


class KeyGenerationError(CryptoError):
    """Key pair generation or serialization failed.

    No key material is produced when this is raised.
    """

    pass


class InvalidKeyError(CryptoError):
    """A public or private key blob is not a valid key for the scheme."""

    pass


class EncapsulationError(CryptoError):
    """KEM encapsulation failure."""

    pass


class DecapsulationError(CryptoError):
    """KEM decapsulation failure, including a malformed capsule."""

    pass


class EmptySecretError(CryptoError):
    """The KEM produced a zero-length shared secret.

    Unreachable with a correct primitive; treat as an internal invariant violation.
    """

    pass


class DecodingError(CryptoError):
    """Malformed base64 or text encoding at the service boundary."""

    pass


class KeyNotFoundError(KyberTransitError):
    """No key pair is bound under the requested name (404)."""

    pass


class KeyAlreadyExistsError(KyberTransitError):
    """A key pair is already bound under the requested name (409)."""

    pass


class ApiError(KyberTransitError):
    """HTTP API error with status code.

    Attributes:
        status_code: The HTTP status code.
        message: The error message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class NetworkError(KyberTransitError):
    """Network communication failure."""

    pass
