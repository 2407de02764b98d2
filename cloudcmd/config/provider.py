"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass
from typing import Protocol


@dataclass
class DecoderConfig:
    """Content decoding configuration."""
    # Apply every step of a combined label (gz+base64) instead of only the first
    chain_encodings: bool = True
    # Fail on unrecognized encoding labels instead of treating them as plain text
    strict_encodings: bool = False


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    max_payload_bytes: int


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_decoder_config(self) -> DecoderConfig:
        """Get content decoding configuration."""
        ...

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: str) -> int:
    value = os.getenv(name, default)
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_decoder_config(self) -> DecoderConfig:
        """Get content decoding configuration from environment variables."""
        return DecoderConfig(
            chain_encodings=_env_flag("CLOUDCMD_CHAIN_ENCODINGS", "true"),
            strict_encodings=_env_flag("CLOUDCMD_STRICT_ENCODINGS", "false"),
        )

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=_env_int("API_PORT", "8080"),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=_env_flag("API_DEBUG", "false"),
            max_payload_bytes=_env_int("MAX_PAYLOAD_BYTES", str(1024 * 1024)),
        )
