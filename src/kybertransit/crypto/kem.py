"""KEM capability interface and the ML-KEM implementation for Kyber Transit."""

from __future__ import annotations

import hashlib
import hmac
from abc import ABC, abstractmethod
from types import ModuleType

from pqcrypto.kem import ml_kem_512, ml_kem_768, ml_kem_1024

from ..errors import ConfigError, DecapsulationError, EncapsulationError, InvalidKeyError
from .constants import (
    MLKEM512_CIPHERTEXT_SIZE,
    MLKEM512_PUBLIC_KEY_SIZE,
    MLKEM512_SECRET_KEY_SIZE,
    MLKEM768_CIPHERTEXT_SIZE,
    MLKEM768_PUBLIC_KEY_SIZE,
    MLKEM768_SECRET_KEY_SIZE,
    MLKEM1024_CIPHERTEXT_SIZE,
    MLKEM1024_PUBLIC_KEY_SIZE,
    MLKEM1024_SECRET_KEY_SIZE,
    MLKEM_POLY_BYTES,
    MLKEM_Q,
    MLKEM_SHARED_SECRET_SIZE,
    MLKEM_SYM_BYTES,
)


class KemScheme(ABC):
    """Key encapsulation mechanism contract.

    The directory and the seal/unseal transform only talk to this interface,
    so the underlying post-quantum primitive can be swapped freely.

    Attributes:
        name: Canonical scheme name, e.g. ``ml-kem-1024``.
        public_key_size: Serialized public key size in bytes.
        secret_key_size: Serialized secret key size in bytes.
        ciphertext_size: Capsule size in bytes.
        shared_secret_size: Shared secret size in bytes.
    """

    name: str
    public_key_size: int
    secret_key_size: int
    ciphertext_size: int
    shared_secret_size: int

    @abstractmethod
    def generate_keypair(self) -> tuple[bytes, bytes]:
        """Generate a key pair.

        Returns:
            Tuple of (public_key, secret_key) in serialized form.
        """
        pass  # pragma: no cover

    @abstractmethod
    def encapsulate(self, public_key: bytes) -> tuple[bytes, bytes]:
        """Encapsulate a fresh shared secret against a public key.

        Args:
            public_key: Serialized public key.

        Returns:
            Tuple of (capsule, shared_secret).
        """
        pass  # pragma: no cover

    @abstractmethod
    def decapsulate(self, secret_key: bytes, capsule: bytes) -> bytes:
        """Recover the shared secret from a capsule.

        Args:
            secret_key: Serialized secret key.
            capsule: Capsule produced by ``encapsulate``.

        Returns:
            The shared secret.
        """
        pass  # pragma: no cover

    @abstractmethod
    def validate_public_key(self, public_key: bytes) -> None:
        """Raise InvalidKeyError unless ``public_key`` is a valid key for the scheme."""
        pass  # pragma: no cover

    @abstractmethod
    def validate_secret_key(self, secret_key: bytes) -> None:
        """Raise InvalidKeyError unless ``secret_key`` is a valid key for the scheme."""
        pass  # pragma: no cover

    def validate_capsule(self, capsule: bytes) -> None:
        """Raise DecapsulationError unless ``capsule`` has the scheme's capsule size."""
        if len(capsule) != self.ciphertext_size:
            raise DecapsulationError(
                f"Invalid capsule length: {len(capsule)}, expected {self.ciphertext_size}"
            )


class MlKemScheme(KemScheme):
    """ML-KEM (FIPS 203) backed by pqcrypto.

    Keys are checked with the FIPS 203 input validation rules before use:
    the encapsulation key modulus check (section 7.1) and the decapsulation
    key hash check (section 7.2).
    """

    def __init__(
        self,
        name: str,
        module: ModuleType,
        k: int,
        public_key_size: int,
        secret_key_size: int,
        ciphertext_size: int,
    ) -> None:
        self.name = name
        self.k = k
        self.public_key_size = public_key_size
        self.secret_key_size = secret_key_size
        self.ciphertext_size = ciphertext_size
        self.shared_secret_size = MLKEM_SHARED_SECRET_SIZE
        self._module = module

    def __repr__(self) -> str:
        return f"MlKemScheme({self.name!r})"

    def generate_keypair(self) -> tuple[bytes, bytes]:
        public_key, secret_key = self._module.generate_keypair()
        return bytes(public_key), bytes(secret_key)

    def encapsulate(self, public_key: bytes) -> tuple[bytes, bytes]:
        self.validate_public_key(public_key)
        try:
            capsule, shared_secret = self._module.encrypt(public_key)
        except Exception as e:
            raise EncapsulationError(f"Encapsulation failed: {e}") from e
        return bytes(capsule), bytes(shared_secret)

    def decapsulate(self, secret_key: bytes, capsule: bytes) -> bytes:
        self.validate_secret_key(secret_key)
        self.validate_capsule(capsule)
        try:
            shared_secret = self._module.decrypt(secret_key, capsule)
        except Exception as e:
            raise DecapsulationError(f"Decapsulation failed: {e}") from e
        return bytes(shared_secret)

    def validate_public_key(self, public_key: bytes) -> None:
        if len(public_key) != self.public_key_size:
            raise InvalidKeyError(
                f"Invalid public key length: {len(public_key)}, expected {self.public_key_size}"
            )
        if not _modulus_check(public_key[: MLKEM_POLY_BYTES * self.k]):
            raise InvalidKeyError("Invalid public key: coefficient out of range")

    def validate_secret_key(self, secret_key: bytes) -> None:
        """Validate a decapsulation key.

        The ML-KEM secret key layout is:
          secretKey = cpaPrivateKey || publicKey || H(publicKey) || z
        where cpaPrivateKey is 384 * k bytes and H is SHA3-256.
        """
        if len(secret_key) != self.secret_key_size:
            raise InvalidKeyError(
                f"Invalid secret key length: {len(secret_key)}, expected {self.secret_key_size}"
            )
        offset = MLKEM_POLY_BYTES * self.k
        public_key = secret_key[offset : offset + self.public_key_size]
        h_stored = secret_key[
            offset + self.public_key_size : offset + self.public_key_size + MLKEM_SYM_BYTES
        ]
        if not hmac.compare_digest(hashlib.sha3_256(public_key).digest(), h_stored):
            raise InvalidKeyError("Invalid secret key: embedded public key hash mismatch")


def _modulus_check(encoded: bytes) -> bool:
    """Check that every packed 12-bit coefficient is below q.

    Every 3 bytes pack two little-endian 12-bit coefficients.
    """
    for i in range(0, len(encoded), 3):
        b0, b1, b2 = encoded[i], encoded[i + 1], encoded[i + 2]
        if (b0 | ((b1 & 0x0F) << 8)) >= MLKEM_Q:
            return False
        if ((b1 >> 4) | (b2 << 4)) >= MLKEM_Q:
            return False
    return True


ML_KEM_512 = MlKemScheme(
    "ml-kem-512",
    ml_kem_512,
    k=2,
    public_key_size=MLKEM512_PUBLIC_KEY_SIZE,
    secret_key_size=MLKEM512_SECRET_KEY_SIZE,
    ciphertext_size=MLKEM512_CIPHERTEXT_SIZE,
)
ML_KEM_768 = MlKemScheme(
    "ml-kem-768",
    ml_kem_768,
    k=3,
    public_key_size=MLKEM768_PUBLIC_KEY_SIZE,
    secret_key_size=MLKEM768_SECRET_KEY_SIZE,
    ciphertext_size=MLKEM768_CIPHERTEXT_SIZE,
)
ML_KEM_1024 = MlKemScheme(
    "ml-kem-1024",
    ml_kem_1024,
    k=4,
    public_key_size=MLKEM1024_PUBLIC_KEY_SIZE,
    secret_key_size=MLKEM1024_SECRET_KEY_SIZE,
    ciphertext_size=MLKEM1024_CIPHERTEXT_SIZE,
)

_SCHEMES: dict[str, KemScheme] = {
    "ml-kem-512": ML_KEM_512,
    "ml-kem-768": ML_KEM_768,
    "ml-kem-1024": ML_KEM_1024,
    # Pre-standard Kyber names
    "kyber512": ML_KEM_512,
    "kyber768": ML_KEM_768,
    "kyber1024": ML_KEM_1024,
}

DEFAULT_SCHEME = ML_KEM_1024


def get_scheme(name: str) -> KemScheme:
    """Look up a supported KEM scheme by name.

    Args:
        name: Scheme name, case-insensitive (``ml-kem-1024``, ``kyber1024``, ...).

    Returns:
        The matching KemScheme.

    Raises:
        ConfigError: If the scheme is not supported.
    """
    scheme = _SCHEMES.get(name.strip().lower().replace("_", "-"))
    if scheme is None:
        supported = ", ".join(sorted(_SCHEMES))
        raise ConfigError(f"Unsupported KEM scheme: {name!r} (supported: {supported})")
    return scheme
