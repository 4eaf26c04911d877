"""Base skill interface for simplemcp.

This module defines the Skill protocol that every tool implements, and the
BaseSkill convenience class that handles argument validation.

A skill ("tool" on the wire) has a name, a human description, a JSON Schema
for its arguments, and an async execute() that turns a raw argument payload
into a ToolResult. The payload arrives straight from the client, so execute()
is responsible for checking its shape before using it.
"""

from abc import ABC, abstractmethod
from typing import Any, Protocol, runtime_checkable

import jsonschema

from simplemcp.core.types import ToolResult
from simplemcp.skill.errors import InvalidArgumentsError


@runtime_checkable
class Skill(Protocol):
    """Protocol for all skills.

    Example:
        >>> class EchoSkill:
        ...     name = "echo"
        ...     description = "Echo a message"
        ...     parameters = {"type": "object", "properties": {}, "required": []}
        ...
        ...     def describe(self) -> dict[str, Any]:
        ...         return {"name": self.name, ...}
        ...
        ...     async def execute(self, arguments: Any) -> ToolResult:
        ...         return ToolResult.from_text(str(arguments))
    """

    @property
    def name(self) -> str:
        """Unique tool name (registry key and wire name)."""
        ...

    @property
    def description(self) -> str:
        """Human-readable description shown by tools/list."""
        ...

    @property
    def parameters(self) -> dict[str, Any]:
        """JSON Schema for the argument payload."""
        ...

    def describe(self) -> dict[str, Any]:
        """Return the tool descriptor advertised by tools/list."""
        ...

    async def execute(self, arguments: Any) -> ToolResult:
        """Validate the raw argument payload and run the tool.

        Raises:
            InvalidArgumentsError: If the payload does not match the schema.
            ToolExecutionError: If the tool fails for a domain reason.
        """
        ...


def validate_arguments(
    arguments: Any,
    schema: dict[str, Any],
    skill_name: str,
) -> dict[str, Any]:
    """Validate a raw argument payload against a skill's JSON Schema.

    A missing payload (None) is treated as an empty object. Properties not
    declared in the schema are dropped from the returned dict.

    Args:
        arguments: The payload as received from the client.
        schema: The skill's JSON Schema.
        skill_name: Name of the skill for error messages.

    Returns:
        The validated arguments, restricted to declared properties.

    Raises:
        InvalidArgumentsError: If the payload is not an object or fails validation.
    """
    if arguments is None:
        arguments = {}

    if not isinstance(arguments, dict):
        raise InvalidArgumentsError(
            skill_name,
            f"{skill_name}: arguments must be an object, got {type(arguments).__name__}",
        )

    try:
        jsonschema.validate(arguments, schema)
    except jsonschema.ValidationError as e:
        raise InvalidArgumentsError(skill_name, _format_validation_error(e, skill_name)) from e

    schema_props = set(schema.get("properties", {}).keys())
    return {k: v for k, v in arguments.items() if k in schema_props}


def _format_validation_error(error: Any, skill_name: str) -> str:
    """Format a jsonschema ValidationError into a user-friendly message.

    Args:
        error: The jsonschema validation error.
        skill_name: Name of the skill for context.

    Returns:
        Human-readable error message.
    """
    path = ".".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
    validator = error.validator

    if validator == "required":
        # error.message is like "'city' is a required property"
        return f"{skill_name}: {error.message}"

    if validator == "type":
        if path:
            return f"{skill_name}: Parameter '{path}' has wrong type - {error.message}"
        return f"{skill_name}: {error.message}"

    if validator == "enum":
        if path:
            return f"{skill_name}: Parameter '{path}' must be one of {error.validator_value}"
        return f"{skill_name}: Value must be one of {error.validator_value}"

    if path:
        return f"{skill_name}: Parameter '{path}' - {error.message}"
    return f"{skill_name}: {error.message}"


class BaseSkill(ABC):
    """Convenience base class for implementing skills.

    Stores name, description, and parameters set in __init__ and validates
    the argument payload in execute(). Subclasses implement run(), which
    receives the validated arguments as keyword arguments.

    Example:
        >>> class EchoSkill(BaseSkill):
        ...     def __init__(self):
        ...         super().__init__(
        ...             name="echo",
        ...             description="Echo back the input text",
        ...             parameters={
        ...                 "type": "object",
        ...                 "properties": {
        ...                     "text": {"type": "string", "description": "Text to echo"}
        ...                 },
        ...                 "required": ["text"]
        ...             }
        ...         )
        ...
        ...     async def run(self, text: str = "", **kwargs: Any) -> ToolResult:
        ...         return ToolResult.from_text(text)
    """

    def __init__(
        self,
        name: str,
        description: str,
        parameters: dict[str, Any],
    ) -> None:
        """Initialize the skill with its metadata.

        Args:
            name: Unique tool name (snake_case recommended).
            description: Human-readable description for the client.
            parameters: JSON Schema for the tool's arguments.
        """
        self._name = name
        self._description = description
        self._parameters = parameters

    @property
    def name(self) -> str:
        """Unique tool name."""
        return self._name

    @property
    def description(self) -> str:
        """Human-readable description."""
        return self._description

    @property
    def parameters(self) -> dict[str, Any]:
        """JSON Schema for arguments."""
        return self._parameters

    def describe(self) -> dict[str, Any]:
        """Return the tool descriptor in tools/list format."""
        return {
            "name": self._name,
            "description": self._description,
            "inputSchema": self._parameters,
        }

    async def execute(self, arguments: Any) -> ToolResult:
        """Validate the payload, then delegate to run()."""
        validated = validate_arguments(arguments, self._parameters, self._name)
        return await self.run(**validated)

    @abstractmethod
    async def run(self, **kwargs: Any) -> ToolResult:
        """Run the tool with validated arguments.

        Raises:
            ToolExecutionError: If the tool fails for a domain reason.
        """
        ...


def string_property(description: str) -> dict[str, str]:
    """Schema fragment for a string-typed property."""
    return {"type": "string", "description": description}


def object_schema(
    properties: dict[str, dict[str, Any]],
    required: list[str] | None = None,
) -> dict[str, Any]:
    """Build an object input schema with the given properties."""
    return {
        "type": "object",
        "properties": properties,
        "required": list(required or []),
    }
