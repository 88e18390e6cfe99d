"""Application factory for the transit server."""

from __future__ import annotations

from fastapi import FastAPI

from ..crypto.kem import DEFAULT_SCHEME, KemScheme
from ..keystore import KeyDirectory
from .handlers import router


def create_app(
    directory: KeyDirectory | None = None,
    scheme: KemScheme = DEFAULT_SCHEME,
) -> FastAPI:
    """Build the transit API application.

    Each application owns its key directory; pass one in to share or inspect
    it, otherwise a fresh, empty directory using ``scheme`` is created.

    Args:
        directory: Key directory to serve from.
        scheme: KEM scheme for a newly created directory.

    Returns:
        The configured FastAPI application.
    """
    app = FastAPI(title="Kyber Transit API", docs_url=None, redoc_url=None, openapi_url=None)
    app.state.directory = directory if directory is not None else KeyDirectory(scheme)
    app.include_router(router)
    return app
