"""Environment-based configuration for the Kyber Transit server."""

from __future__ import annotations

import logging
import os
import re

from dotenv import find_dotenv, load_dotenv

from .constants import (
    DEFAULT_KEM_SCHEME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_SERVER_HOST,
    DEFAULT_SERVER_PORT,
    DEFAULT_SHUTDOWN_TIMEOUT_S,
    ENV_KEM_SCHEME,
    ENV_LOG_LEVEL,
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    ENV_SHUTDOWN_TIMEOUT,
)
from .crypto.kem import get_scheme
from .errors import ConfigError
from .types import ServerConfig

_PORT_PATTERN = re.compile(r"^:[0-9]{2,5}$")


def parse_port(value: str) -> int:
    """Parse a listen port given as ``:8080`` or ``8080``.

    Raises:
        ConfigError: If the value is not a valid port.
    """
    port = value.strip()
    if not port.startswith(":"):
        port = ":" + port
    if not _PORT_PATTERN.match(port):
        raise ConfigError(f"Invalid port format {value!r}: must be :PORT, e.g. :8080")
    number = int(port[1:])
    if not 1 <= number <= 65535:
        raise ConfigError(f"Invalid port {value!r}: must be between 1 and 65535")
    return number


def load_config(*, dotenv: bool = True) -> ServerConfig:
    """Load server configuration from environment variables.

    A ``.env`` file in the working directory is read first when ``dotenv`` is
    true; variables already set in the environment take precedence.

    Returns:
        The server configuration.

    Raises:
        ConfigError: If any variable holds an invalid value.
    """
    if dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    port = parse_port(os.getenv(ENV_SERVER_PORT) or DEFAULT_SERVER_PORT)
    host = os.getenv(ENV_SERVER_HOST) or DEFAULT_SERVER_HOST

    kem_scheme = os.getenv(ENV_KEM_SCHEME) or DEFAULT_KEM_SCHEME
    kem_scheme = get_scheme(kem_scheme).name

    log_level = (os.getenv(ENV_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Invalid log level: {log_level!r}")

    raw_timeout = os.getenv(ENV_SHUTDOWN_TIMEOUT)
    shutdown_timeout = DEFAULT_SHUTDOWN_TIMEOUT_S
    if raw_timeout:
        try:
            shutdown_timeout = float(raw_timeout)
        except ValueError as e:
            raise ConfigError(f"Invalid shutdown timeout: {raw_timeout!r}") from e
        if shutdown_timeout < 0:
            raise ConfigError(f"Invalid shutdown timeout: {raw_timeout!r}")

    return ServerConfig(
        port=port,
        host=host,
        kem_scheme=kem_scheme,
        log_level=log_level,
        shutdown_timeout=shutdown_timeout,
    )
