"""Configuration loading and validation."""

from simplemcp.config.loader import load_config
from simplemcp.config.schema import Config, FetchConfig, LoggingConfig, ServerConfig

__all__ = [
    "Config",
    "FetchConfig",
    "LoggingConfig",
    "ServerConfig",
    "load_config",
]
