"""Kyber Transit.

A small transit-encryption service: post-quantum (ML-KEM) key pairs are
issued under caller-chosen names and used to seal plaintext into a
(capsule, masked data) pair that the same name can unseal again.

Example:
    ```python
    import asyncio
    from kybertransit import ClientConfig, TransitApiClient

    async def main():
        config = ClientConfig(base_url="http://localhost:8080")
        async with TransitApiClient(config) as client:
            await client.create_key("alice")
            sealed = await client.encrypt("alice", "hello quantum world")
            print(await client.decrypt("alice", sealed.ciphertext, sealed.encdata))

    asyncio.run(main())
    ```
"""

from .config import load_config
from .constants import (
    DEFAULT_KEM_SCHEME,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_DELAY_MS,
    DEFAULT_RETRY_STATUS_CODES,
    DEFAULT_TIMEOUT_MS,
)
from .crypto import KemScheme, KeyPair, SealedPayload, generate_keypair, get_scheme, seal, unseal
from .errors import (
    ApiError,
    ConfigError,
    CryptoError,
    DecapsulationError,
    DecodingError,
    EmptySecretError,
    EncapsulationError,
    InvalidKeyError,
    KeyAlreadyExistsError,
    KeyGenerationError,
    KeyNotFoundError,
    KyberTransitError,
    NetworkError,
)
from .http import TransitApiClient
from .keystore import KeyDirectory
from .types import ClientConfig, EncryptResult, ServerConfig

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "KeyDirectory",
    "TransitApiClient",
    # Crypto
    "KemScheme",
    "KeyPair",
    "SealedPayload",
    "generate_keypair",
    "get_scheme",
    "seal",
    "unseal",
    # Constants
    "DEFAULT_KEM_SCHEME",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_RETRY_DELAY_MS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_STATUS_CODES",
    # Configuration
    "ClientConfig",
    "ServerConfig",
    "load_config",
    # Data types
    "EncryptResult",
    # Errors
    "KyberTransitError",
    "ConfigError",
    "CryptoError",
    "KeyGenerationError",
    "InvalidKeyError",
    "EncapsulationError",
    "DecapsulationError",
    "EmptySecretError",
    "DecodingError",
    "KeyNotFoundError",
    "KeyAlreadyExistsError",
    "ApiError",
    "NetworkError",
    # Version
    "__version__",
]
