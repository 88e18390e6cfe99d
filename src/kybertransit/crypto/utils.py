"""Base64 encoding/decoding utilities for Kyber Transit."""

import base64
import binascii

from ..errors import DecodingError


def to_base64(data: bytes) -> str:
    """Encode bytes to standard base64.

    Args:
        data: The bytes to encode.

    Returns:
        Standard base64 string with padding.
    """
    return base64.b64encode(data).decode("ascii")


def from_base64(s: str) -> bytes:
    """Decode a standard, padded base64 string to bytes.

    Characters outside the base64 alphabet and incorrect padding are rejected
    rather than silently discarded.

    Args:
        s: The base64 string to decode.

    Returns:
        The decoded bytes.

    Raises:
        DecodingError: If the string is not valid padded base64.
    """
    try:
        return base64.b64decode(s, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError(f"Invalid base64: {e}") from e
