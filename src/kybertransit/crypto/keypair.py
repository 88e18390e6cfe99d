"""KEM key pair generation for Kyber Transit."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..errors import KeyGenerationError
from .kem import DEFAULT_SCHEME, KemScheme
from .utils import to_base64


@dataclass(frozen=True)
class KeyPair:
    """A KEM key pair in serialized form.

    Both halves are always generated together and stored paired.

    Attributes:
        public_key: The serialized public (encapsulation) key.
        private_key: The serialized private (decapsulation) key.
    """

    public_key: bytes
    private_key: bytes = field(repr=False)

    @property
    def public_key_b64(self) -> str:
        """Standard base64 encoding of the public key."""
        return to_base64(self.public_key)


def generate_keypair(scheme: KemScheme = DEFAULT_SCHEME) -> KeyPair:
    """Generate a new key pair.

    Args:
        scheme: The KEM scheme to use.

    Returns:
        A new KeyPair with serialized public and private keys.

    Raises:
        KeyGenerationError: If the primitive fails or produces malformed keys.
    """
    try:
        public_key, private_key = scheme.generate_keypair()
    except Exception as e:
        raise KeyGenerationError(f"Failed to generate {scheme.name} key pair: {e}") from e
    if len(public_key) != scheme.public_key_size:
        raise KeyGenerationError(
            f"Generated public key has length {len(public_key)}, expected {scheme.public_key_size}"
        )
    if len(private_key) != scheme.secret_key_size:
        raise KeyGenerationError(
            f"Generated private key has length {len(private_key)}, "
            f"expected {scheme.secret_key_size}"
        )
    return KeyPair(public_key=public_key, private_key=private_key)
