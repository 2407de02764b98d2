"""
Logging setup for the cloudcmd CLI and HTTP server.

The CLI logs to stderr so stdout carries only the generated commands.
The server also routes uvicorn's loggers and drops health check access lines.
"""

import logging
import logging.config
import os
from typing import Any, Dict, Iterable, Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Paths polled by Kubernetes liveness and readiness checks
HEALTH_PATHS = ("/health", "/healthz")


class HealthCheckFilter(logging.Filter):
    """Drop uvicorn access records for GET requests on health paths."""

    def __init__(self, paths: Iterable[str] = HEALTH_PATHS):
        super().__init__()
        self.paths = frozenset(paths)

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn access records carry (client, method, path, http_version, status)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 3:
            return True
        method, path = args[1], str(args[2]).split("?", 1)[0]
        return not (method == "GET" and path in self.paths)


def _level(level: Optional[str]) -> str:
    return (level or os.getenv("LOG_LEVEL", "INFO")).upper()


def cli_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """cloudcmd loggers only, written to stderr."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": {"format": LOG_FORMAT}},
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "cloudcmd": {"handlers": ["stderr"], "level": _level(level), "propagate": False}
        },
    }


def server_logging_config(level: Optional[str] = None) -> Dict[str, Any]:
    """CLI config plus uvicorn loggers, with health checks filtered from access logs."""
    config = cli_logging_config(level)
    config["filters"] = {"health_checks": {"()": HealthCheckFilter}}
    config["formatters"]["access"] = {"format": "%(message)s"}
    config["handlers"]["access"] = {
        "class": "logging.StreamHandler",
        "formatter": "access",
        "stream": "ext://sys.stdout",
        "filters": ["health_checks"],
    }
    for name in ("uvicorn", "uvicorn.error"):
        config["loggers"][name] = {"handlers": ["stderr"], "level": "INFO", "propagate": False}
    config["loggers"]["uvicorn.access"] = {
        "handlers": ["access"],
        "level": "INFO",
        "propagate": False,
    }
    return config


def configure_logging(level: Optional[str] = None) -> None:
    """Apply the CLI logging configuration."""
    logging.config.dictConfig(cli_logging_config(level))
