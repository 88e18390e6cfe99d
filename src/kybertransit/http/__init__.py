"""HTTP client for the Kyber Transit API."""

from .api_client import TransitApiClient, encode_path_segment

__all__ = ["TransitApiClient", "encode_path_segment"]
