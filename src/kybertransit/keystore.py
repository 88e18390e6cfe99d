"""In-memory key directory for Kyber Transit.

Key pairs live only for the lifetime of the process; nothing is persisted.
"""

from __future__ import annotations

import logging

from .crypto.kem import DEFAULT_SCHEME, KemScheme
from .crypto.keypair import KeyPair, generate_keypair
from .errors import KeyNotFoundError
from .utils.rwlock import ReadWriteLock

logger = logging.getLogger("kybertransit")


class KeyDirectory:
    """Thread-safe registry mapping names to key pairs.

    A name is bound at most once: the first successful ``create_key`` wins
    and the binding is immutable until ``reset_all``.

    Attributes:
        scheme: KEM scheme used to generate new key pairs.
    """

    def __init__(self, scheme: KemScheme = DEFAULT_SCHEME) -> None:
        self.scheme = scheme
        self._keys: dict[str, KeyPair] = {}
        self._lock = ReadWriteLock()

    def create_key(self, name: str) -> tuple[KeyPair, bool]:
        """Create and bind a key pair under ``name``.

        The existence check, generation and insert happen under one exclusive
        lock, so concurrent calls for the same name generate exactly one pair.

        Args:
            name: The name to bind.

        Returns:
            Tuple of (key pair, already_existed). When the name was already
            bound the existing pair is returned unchanged.

        Raises:
            KeyGenerationError: If generation fails. The directory is unchanged.
        """
        with self._lock.write_locked():
            existing = self._keys.get(name)
            if existing is not None:
                return existing, True
            keypair = generate_keypair(self.scheme)
            self._keys[name] = keypair
        logger.info("Created %s key pair %r", self.scheme.name, name)
        return keypair, False

    def get_key(self, name: str) -> KeyPair | None:
        """Look up the key pair bound under ``name``.

        Returns:
            The key pair, or None if the name is not bound.
        """
        with self._lock.read_locked():
            return self._keys.get(name)

    def require_key(self, name: str) -> KeyPair:
        """Look up the key pair bound under ``name``.

        Raises:
            KeyNotFoundError: If the name is not bound.
        """
        keypair = self.get_key(name)
        if keypair is None:
            raise KeyNotFoundError(f"Key not found: {name}")
        return keypair

    def reset_all(self) -> None:
        """Remove every binding. Intended for tests and administrative resets."""
        with self._lock.write_locked():
            count = len(self._keys)
            self._keys.clear()
        logger.info("Key directory reset (%d key pairs removed)", count)

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._keys)

    def __contains__(self, name: object) -> bool:
        with self._lock.read_locked():
            return name in self._keys
