"""HTTP service for Kyber Transit."""

from .app import create_app
from .routes import (
    ROUTE_CREATE_KEY,
    ROUTE_DECRYPT,
    ROUTE_ENCRYPT,
    ROUTE_HEALTH,
    ROUTE_NAME_CREATE_KEY,
    ROUTE_NAME_DECRYPT,
    ROUTE_NAME_ENCRYPT,
    ROUTE_NAME_HEALTH,
)

__all__ = [
    "ROUTE_CREATE_KEY",
    "ROUTE_DECRYPT",
    "ROUTE_ENCRYPT",
    "ROUTE_HEALTH",
    "ROUTE_NAME_CREATE_KEY",
    "ROUTE_NAME_DECRYPT",
    "ROUTE_NAME_ENCRYPT",
    "ROUTE_NAME_HEALTH",
    "create_app",
]
