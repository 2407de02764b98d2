"""
Tests for the environment configuration provider and logging config.
"""

import logging
import logging.config

import pytest

from cloudcmd.config.provider import EnvConfigProvider
from cloudcmd.logging_config import HealthCheckFilter, cli_logging_config, server_logging_config


class TestEnvConfigProvider:
    """Test EnvConfigProvider."""

    def test_decoder_defaults(self, monkeypatch):
        monkeypatch.delenv("CLOUDCMD_CHAIN_ENCODINGS", raising=False)
        monkeypatch.delenv("CLOUDCMD_STRICT_ENCODINGS", raising=False)

        config = EnvConfigProvider().get_decoder_config()
        assert config.chain_encodings is True
        assert config.strict_encodings is False

    def test_decoder_from_env(self, monkeypatch):
        monkeypatch.setenv("CLOUDCMD_CHAIN_ENCODINGS", "false")
        monkeypatch.setenv("CLOUDCMD_STRICT_ENCODINGS", "TRUE")

        config = EnvConfigProvider().get_decoder_config()
        assert config.chain_encodings is False
        assert config.strict_encodings is True

    def test_api_config(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "9090")
        monkeypatch.setenv("API_HOST", "127.0.0.1")
        monkeypatch.delenv("MAX_PAYLOAD_BYTES", raising=False)

        config = EnvConfigProvider().get_api_config()
        assert config.port == 9090
        assert config.host == "127.0.0.1"
        assert config.max_payload_bytes == 1024 * 1024

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("API_PORT", "eighty")
        with pytest.raises(ValueError) as exc_info:
            EnvConfigProvider().get_api_config()
        assert "API_PORT" in str(exc_info.value)


class TestLoggingConfig:
    """Test logging configuration."""

    def test_level_from_argument(self):
        config = cli_logging_config("debug")
        assert config["loggers"]["cloudcmd"]["level"] == "DEBUG"

    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "warning")
        assert cli_logging_config()["loggers"]["cloudcmd"]["level"] == "WARNING"

    def test_cli_config_leaves_uvicorn_alone(self):
        config = cli_logging_config("INFO")
        assert set(config["loggers"]) == {"cloudcmd"}
        assert config["handlers"]["stderr"]["stream"] == "ext://sys.stderr"

    def test_server_config_routes_uvicorn(self):
        config = server_logging_config("INFO")
        assert config["filters"]["health_checks"]["()"] is HealthCheckFilter
        assert config["loggers"]["uvicorn.access"]["handlers"] == ["access"]
        assert config["handlers"]["access"]["filters"] == ["health_checks"]
        assert config["loggers"]["uvicorn.error"]["handlers"] == ["stderr"]

    def test_server_config_is_loadable(self):
        logging.config.dictConfig(server_logging_config("WARNING"))
        access = logging.getLogger("uvicorn.access")
        assert any(
            isinstance(f, HealthCheckFilter) for h in access.handlers for f in h.filters
        )
        logging.config.dictConfig(cli_logging_config("WARNING"))


class TestHealthCheckFilter:
    """Test dropping health check lines from uvicorn access logs."""

    def setup_method(self):
        self.health_filter = HealthCheckFilter()

    def _access_record(self, method, path, status=200):
        # Same shape uvicorn uses for its access log records
        return logging.LogRecord(
            "uvicorn.access",
            logging.INFO,
            __file__,
            1,
            '%s - "%s %s HTTP/%s" %d',
            ("127.0.0.1:5000", method, path, "1.1", status),
            None,
        )

    def test_drops_health_polls(self):
        assert self.health_filter.filter(self._access_record("GET", "/healthz")) is False
        assert self.health_filter.filter(self._access_record("GET", "/health")) is False

    def test_drops_health_polls_with_query(self):
        assert self.health_filter.filter(self._access_record("GET", "/healthz?check=1")) is False

    def test_keeps_other_requests(self):
        assert self.health_filter.filter(self._access_record("POST", "/convert")) is True
        assert self.health_filter.filter(self._access_record("POST", "/healthz")) is True

    def test_keeps_records_without_args(self):
        record = logging.LogRecord("cloudcmd.api", logging.INFO, __file__, 1, "GET /health", None, None)
        assert self.health_filter.filter(record) is True

    def test_custom_paths(self):
        health_filter = HealthCheckFilter(paths=["/ready"])
        assert health_filter.filter(self._access_record("GET", "/ready")) is False
        assert health_filter.filter(self._access_record("GET", "/healthz")) is True
