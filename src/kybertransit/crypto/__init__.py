"""Cryptographic operations for Kyber Transit."""

from .kem import (
    DEFAULT_SCHEME,
    ML_KEM_512,
    ML_KEM_768,
    ML_KEM_1024,
    KemScheme,
    MlKemScheme,
    get_scheme,
)
from .keypair import KeyPair, generate_keypair
from .transit import SealedPayload, decrypt, encrypt, mask, seal, unseal
from .utils import from_base64, to_base64

__all__ = [
    "DEFAULT_SCHEME",
    "ML_KEM_512",
    "ML_KEM_768",
    "ML_KEM_1024",
    "KemScheme",
    "KeyPair",
    "MlKemScheme",
    "SealedPayload",
    "decrypt",
    "encrypt",
    "from_base64",
    "generate_keypair",
    "get_scheme",
    "mask",
    "seal",
    "to_base64",
    "unseal",
]
