"""Process entry point for the transit server."""

from __future__ import annotations

import logging
import math
import sys

import uvicorn

from ..config import load_config
from ..crypto.kem import get_scheme
from ..errors import ConfigError
from ..keystore import KeyDirectory
from ..types import ServerConfig
from .app import create_app

logger = logging.getLogger("kybertransit")


def build_server(config: ServerConfig) -> uvicorn.Server:
    """Build the uvicorn server for ``config``.

    uvicorn takes whole seconds for the graceful shutdown window, so a
    fractional timeout is rounded up rather than truncated.
    """
    app = create_app(KeyDirectory(get_scheme(config.kem_scheme)))
    return uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            timeout_graceful_shutdown=math.ceil(config.shutdown_timeout),
        )
    )


def main() -> int:
    """Load configuration and serve the API until SIGINT/SIGTERM."""
    try:
        config = load_config()
    except ConfigError as e:
        print(f"configuration error: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    server = build_server(config)
    logger.info("Kyber Transit API server running on %s (%s)", config.address, config.kem_scheme)
    server.run()
    logger.info("Server exited gracefully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
