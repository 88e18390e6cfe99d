"""Tests for environment-based server configuration."""

from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

from kybertransit.config import load_config, parse_port
from kybertransit.constants import (
    ENV_KEM_SCHEME,
    ENV_LOG_LEVEL,
    ENV_SERVER_HOST,
    ENV_SERVER_PORT,
    ENV_SHUTDOWN_TIMEOUT,
)
from kybertransit.errors import ConfigError


ENV_VARS = (
    ENV_SERVER_PORT,
    ENV_SERVER_HOST,
    ENV_KEM_SCHEME,
    ENV_LOG_LEVEL,
    ENV_SHUTDOWN_TIMEOUT,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove all server variables from the environment.

    Values loaded from .env files are discarded afterwards as well.
    """
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_VARS:
        os.environ.pop(name, None)


class TestParsePort:
    """Tests for port parsing."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(":8080", 8080), ("9090", 9090), (":65535", 65535), (" :10 ", 10)],
    )
    def test_valid(self, value: str, expected: int) -> None:
        """Ports with or without the leading colon are accepted."""
        assert parse_port(value) == expected

    @pytest.mark.parametrize("value", ["abc", ":1", ":123456", "80a", ":", ""])
    def test_invalid_format(self, value: str) -> None:
        """Malformed ports raise ConfigError."""
        with pytest.raises(ConfigError, match="Invalid port format"):
            parse_port(value)

    @pytest.mark.parametrize("value", [":00", ":99999"])
    def test_out_of_range(self, value: str) -> None:
        """Ports outside 1-65535 raise ConfigError."""
        with pytest.raises(ConfigError, match="between 1 and 65535"):
            parse_port(value)


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self) -> None:
        """With no variables set the defaults apply."""
        config = load_config(dotenv=False)
        assert config.port == 8080
        assert config.address == ":8080"
        assert config.host == "0.0.0.0"
        assert config.kem_scheme == "ml-kem-1024"
        assert config.log_level == "INFO"
        assert config.shutdown_timeout == 5.0

    def test_port_without_colon(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """KYBER_SERVER_PORT=9090 yields :9090."""
        monkeypatch.setenv(ENV_SERVER_PORT, "9090")
        assert load_config(dotenv=False).address == ":9090"

    def test_port_with_colon(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """KYBER_SERVER_PORT=:7070 yields :7070."""
        monkeypatch.setenv(ENV_SERVER_PORT, ":7070")
        assert load_config(dotenv=False).port == 7070

    def test_invalid_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An invalid port is a configuration error."""
        monkeypatch.setenv(ENV_SERVER_PORT, "not-a-port")
        with pytest.raises(ConfigError):
            load_config(dotenv=False)

    def test_scheme_alias_is_canonicalized(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Kyber aliases resolve to the canonical ML-KEM name."""
        monkeypatch.setenv(ENV_KEM_SCHEME, "kyber768")
        assert load_config(dotenv=False).kem_scheme == "ml-kem-768"

    def test_unknown_scheme(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """An unsupported scheme is a configuration error."""
        monkeypatch.setenv(ENV_KEM_SCHEME, "x25519")
        with pytest.raises(ConfigError, match="Unsupported KEM scheme"):
            load_config(dotenv=False)

    def test_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Log levels are upper-cased and validated."""
        monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
        assert load_config(dotenv=False).log_level == "DEBUG"
        monkeypatch.setenv(ENV_LOG_LEVEL, "chatty")
        with pytest.raises(ConfigError, match="Invalid log level"):
            load_config(dotenv=False)

    def test_shutdown_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The shutdown timeout is parsed as seconds."""
        monkeypatch.setenv(ENV_SHUTDOWN_TIMEOUT, "2.5")
        assert load_config(dotenv=False).shutdown_timeout == 2.5
        monkeypatch.setenv(ENV_SHUTDOWN_TIMEOUT, "soon")
        with pytest.raises(ConfigError, match="Invalid shutdown timeout"):
            load_config(dotenv=False)
        monkeypatch.setenv(ENV_SHUTDOWN_TIMEOUT, "-1")
        with pytest.raises(ConfigError, match="Invalid shutdown timeout"):
            load_config(dotenv=False)

    def test_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Values are read from a .env file in the working directory."""
        (tmp_path / ".env").write_text(f"{ENV_SERVER_PORT}=6060\n{ENV_SERVER_HOST}=127.0.0.1\n")
        monkeypatch.chdir(tmp_path)
        config = load_config()
        assert config.port == 6060
        assert config.host == "127.0.0.1"

    def test_environment_overrides_dotenv(self, monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
        """Variables already in the environment win over .env."""
        (tmp_path / ".env").write_text(f"{ENV_SERVER_PORT}=6060\n")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv(ENV_SERVER_PORT, "7070")
        assert load_config().port == 7070
