"""Core types and errors."""

from simplemcp.core.errors import ConfigError, SimpleMcpError
from simplemcp.core.identifiers import ToolNameError, validate_tool_name
from simplemcp.core.types import CONTENT_TYPE_TEXT, Content, ToolResult

__all__ = [
    "SimpleMcpError",
    "ConfigError",
    "ToolNameError",
    "validate_tool_name",
    "CONTENT_TYPE_TEXT",
    "Content",
    "ToolResult",
]
