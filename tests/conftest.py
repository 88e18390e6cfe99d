"""Shared fixtures and test doubles for Kyber Transit tests."""

from __future__ import annotations

import threading

import pytest
from fastapi.testclient import TestClient

from kybertransit.crypto import ML_KEM_1024, KemScheme, KeyPair, generate_keypair
from kybertransit.keystore import KeyDirectory
from kybertransit.server import create_app


class WrappedScheme(KemScheme):
    """Delegates to a real scheme; subclasses override single operations."""

    def __init__(self, inner: KemScheme = ML_KEM_1024) -> None:
        self.inner = inner
        self.name = inner.name
        self.public_key_size = inner.public_key_size
        self.secret_key_size = inner.secret_key_size
        self.ciphertext_size = inner.ciphertext_size
        self.shared_secret_size = inner.shared_secret_size

    def generate_keypair(self) -> tuple[bytes, bytes]:
        return self.inner.generate_keypair()

    def encapsulate(self, public_key: bytes) -> tuple[bytes, bytes]:
        return self.inner.encapsulate(public_key)

    def decapsulate(self, secret_key: bytes, capsule: bytes) -> bytes:
        return self.inner.decapsulate(secret_key, capsule)

    def validate_public_key(self, public_key: bytes) -> None:
        self.inner.validate_public_key(public_key)

    def validate_secret_key(self, secret_key: bytes) -> None:
        self.inner.validate_secret_key(secret_key)


class FailingKeygenScheme(WrappedScheme):
    """Key generation always fails inside the primitive."""

    def generate_keypair(self) -> tuple[bytes, bytes]:
        raise RuntimeError("rng failure")


class ShortKeyScheme(WrappedScheme):
    """Key generation returns a truncated public key."""

    def generate_keypair(self) -> tuple[bytes, bytes]:
        public_key, secret_key = self.inner.generate_keypair()
        return public_key[:10], secret_key


class EmptySecretScheme(WrappedScheme):
    """Encapsulation and decapsulation yield an empty shared secret."""

    def encapsulate(self, public_key: bytes) -> tuple[bytes, bytes]:
        capsule, _ = self.inner.encapsulate(public_key)
        return capsule, b""

    def decapsulate(self, secret_key: bytes, capsule: bytes) -> bytes:
        self.inner.decapsulate(secret_key, capsule)
        return b""


class CountingScheme(WrappedScheme):
    """Counts key generations across threads."""

    def __init__(self, inner: KemScheme = ML_KEM_1024) -> None:
        super().__init__(inner)
        self.generated = 0
        self._count_lock = threading.Lock()

    def generate_keypair(self) -> tuple[bytes, bytes]:
        with self._count_lock:
            self.generated += 1
        return self.inner.generate_keypair()


@pytest.fixture
def keypair() -> KeyPair:
    """A fresh ML-KEM-1024 key pair."""
    return generate_keypair(ML_KEM_1024)


@pytest.fixture
def directory() -> KeyDirectory:
    """An empty key directory."""
    return KeyDirectory()


@pytest.fixture
def client(directory: KeyDirectory) -> TestClient:
    """A test client for an app serving ``directory``."""
    return TestClient(create_app(directory))
