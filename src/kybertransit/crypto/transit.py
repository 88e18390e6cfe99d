"""Seal/unseal transform for Kyber Transit.

SECURITY WARNING: plaintext is XOR-masked with a cyclic repetition of the KEM
shared secret. The transform is reversible but NOT authenticated and NOT
suitable for production; a real system should feed the shared secret into a
KDF and an AEAD cipher.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import EmptySecretError
from .kem import DEFAULT_SCHEME, KemScheme
from .utils import from_base64, to_base64


@dataclass(frozen=True)
class SealedPayload:
    """Output of a seal operation.

    Attributes:
        capsule: The KEM capsule (encapsulated shared secret).
        masked: The plaintext XOR-masked with the shared secret; same length
            as the plaintext.
    """

    capsule: bytes
    masked: bytes

    def to_dict(self) -> dict[str, str]:
        """Return the boundary (base64) representation."""
        return {"ciphertext": to_base64(self.capsule), "encdata": to_base64(self.masked)}


def mask(data: bytes, keystream: bytes) -> bytes:
    """XOR ``data`` with a cyclic repetition of ``keystream``.

    The operation is its own inverse.

    Raises:
        EmptySecretError: If the keystream is empty.
    """
    if not keystream:
        raise EmptySecretError("Shared secret is empty")
    n = len(keystream)
    return bytes(b ^ keystream[i % n] for i, b in enumerate(data))


def seal(public_key: bytes, plaintext: bytes, scheme: KemScheme = DEFAULT_SCHEME) -> SealedPayload:
    """Seal plaintext under a public key.

    Args:
        public_key: Serialized public key.
        plaintext: Bytes to seal. May be empty.
        scheme: The KEM scheme the key belongs to.

    Returns:
        The capsule and the masked plaintext.

    Raises:
        InvalidKeyError: If the public key is malformed.
        EncapsulationError: If encapsulation fails.
        EmptySecretError: If the shared secret is empty.
    """
    capsule, shared_secret = scheme.encapsulate(public_key)
    return SealedPayload(capsule=capsule, masked=mask(plaintext, shared_secret))


def unseal(
    private_key: bytes,
    capsule: bytes,
    masked: bytes,
    scheme: KemScheme = DEFAULT_SCHEME,
) -> bytes:
    """Recover plaintext from a sealed pair.

    The key and the capsule format are validated even when the masked blob is
    empty, so a malformed capsule never unseals successfully.

    Args:
        private_key: Serialized private key.
        capsule: KEM capsule produced by ``seal``.
        masked: Masked plaintext produced by ``seal``.
        scheme: The KEM scheme the key belongs to.

    Returns:
        The plaintext bytes.

    Raises:
        InvalidKeyError: If the private key is malformed.
        DecapsulationError: If the capsule is malformed or decapsulation fails.
        EmptySecretError: If the recovered shared secret is empty.
    """
    scheme.validate_secret_key(private_key)
    scheme.validate_capsule(capsule)
    if not masked:
        return b""
    shared_secret = scheme.decapsulate(private_key, capsule)
    return mask(masked, shared_secret)


def encrypt(
    public_key: bytes, plaintext: bytes, scheme: KemScheme = DEFAULT_SCHEME
) -> tuple[str, str]:
    """Seal plaintext and return the base64-encoded (ciphertext, encdata) pair."""
    sealed = seal(public_key, plaintext, scheme)
    return to_base64(sealed.capsule), to_base64(sealed.masked)


def decrypt(
    private_key: bytes,
    b64_ciphertext: str,
    b64_encdata: str,
    scheme: KemScheme = DEFAULT_SCHEME,
) -> bytes:
    """Decode a base64 (ciphertext, encdata) pair and unseal it.

    Raises:
        DecodingError: If either value is not valid base64.
        InvalidKeyError: If the private key is malformed.
        DecapsulationError: If the capsule is malformed or decapsulation fails.
    """
    capsule = from_base64(b64_ciphertext)
    masked = from_base64(b64_encdata)
    return unseal(private_key, capsule, masked, scheme)
