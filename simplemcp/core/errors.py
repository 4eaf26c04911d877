"""Typed exception hierarchy for simplemcp."""

from __future__ import annotations


class SimpleMcpError(Exception):
    """Base class for all simplemcp errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigError(SimpleMcpError):
    """Raised for configuration issues (missing file, invalid JSON, validation failure)."""
