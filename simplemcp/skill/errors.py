"""Skill-related error classes for simplemcp."""

from simplemcp.core.errors import SimpleMcpError


class SkillError(SimpleMcpError):
    """Base class for all skill-related errors."""


class ToolNotFoundError(SkillError):
    """Raised when a tool is not found in the registry."""

    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Tool not found: {tool_name}")


class InvalidArgumentsError(SkillError):
    """Raised when a tool's argument payload does not match its input schema."""

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(f"invalid arguments: {reason}")


class ToolExecutionError(SkillError):
    """Raised when a tool fails for a domain reason.

    The message is the bare reason so it can be shown to the client as-is.
    """

    def __init__(self, tool_name: str, reason: str) -> None:
        self.tool_name = tool_name
        self.reason = reason
        super().__init__(reason)
