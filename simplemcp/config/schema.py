"""Pydantic models for simplemcp configuration validation."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from simplemcp import __version__

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServerConfig(BaseModel):
    """Server identity advertised by initialize.

    Example in simplemcp.json:
        "server": {"name": "my-tools", "version": "2.1.0"}
    """

    model_config = ConfigDict(extra="forbid")

    name: str = "simplemcp"
    version: str = __version__
    protocol_version: str = "2024-11-05"


class LoggingConfig(BaseModel):
    """Log file settings.

    The log file is append-only and rotates once it reaches max_bytes.
    """

    model_config = ConfigDict(extra="forbid")

    file: str = "mcp-server.log"
    level: LogLevel = "INFO"
    max_bytes: int = Field(default=5 * 1024 * 1024, gt=0)
    backup_count: int = Field(default=3, ge=0)


class FetchConfig(BaseModel):
    """Settings for the fetch_webpage tool."""

    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(default=30.0, gt=0)
    user_agent: str = DEFAULT_USER_AGENT
    max_content_length: int = Field(default=10000, gt=0)


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="forbid")

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)
