"""
Config Module - Black Box Interface

Purpose: Application configuration management
Interface: ConfigProvider, EnvConfigProvider, DecoderConfig, APIConfig
Hidden: Environment parsing

Can be replaced with different config systems by implementing ConfigProvider.
"""

from .provider import APIConfig, ConfigProvider, DecoderConfig, EnvConfigProvider

__all__ = ["APIConfig", "ConfigProvider", "DecoderConfig", "EnvConfigProvider"]
