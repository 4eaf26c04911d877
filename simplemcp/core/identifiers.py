"""Tool name validation.

Every name that enters the tool registry passes through validate_tool_name(),
so clients can rely on names being short, ASCII, and free of separators that
would need escaping.

Usage:
    from simplemcp.core.identifiers import validate_tool_name

    validate_tool_name("get_weather")  # OK
    validate_tool_name("9lives")       # Raises ToolNameError
"""

from __future__ import annotations

import re

MAX_TOOL_NAME_LENGTH: int = 64

# Must start with a letter or underscore, then alphanumeric/underscore/hyphen
VALID_TOOL_NAME_PATTERN = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_-]{0,63}$")


class ToolNameError(ValueError):
    """Raised when a tool name is invalid."""


def validate_tool_name(name: str) -> None:
    """Validate that a tool name conforms to the canonical format.

    Args:
        name: The tool name to validate.

    Raises:
        ToolNameError: If the name is invalid, with a descriptive message.
    """
    if not isinstance(name, str):
        raise ToolNameError(f"Tool name must be a string, got {type(name).__name__}")

    if not name:
        raise ToolNameError("Tool name cannot be empty")

    if len(name) > MAX_TOOL_NAME_LENGTH:
        raise ToolNameError(
            f"Tool name '{name[:20]}...' exceeds maximum length of "
            f"{MAX_TOOL_NAME_LENGTH} characters"
        )

    if not VALID_TOOL_NAME_PATTERN.match(name):
        if name[0].isdigit():
            raise ToolNameError(f"Tool name '{name}' cannot start with a digit")
        if name[0] == "-":
            raise ToolNameError(f"Tool name '{name}' cannot start with a hyphen")
        raise ToolNameError(
            f"Tool name '{name}' contains invalid characters. "
            "Must be 1-64 chars, start with letter/underscore, "
            "contain only alphanumeric/underscore/hyphen"
        )
