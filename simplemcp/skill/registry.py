"""Tool registry mapping names to skill instances.

The registry is populated once at startup and only read afterwards. It is
owned by the server instance rather than being a module global, so tests can
build registries in isolation.

Example:
    from simplemcp.skill.registry import SkillRegistry
    from simplemcp.skill.builtin.calculator import CalculatorSkill

    registry = SkillRegistry()
    registry.register("calculate", CalculatorSkill())

    skill = registry.get("calculate")
    if skill:
        result = await skill.execute({"expression": "2 + 2"})
"""

from __future__ import annotations

import logging
from typing import Any

from simplemcp.core.identifiers import validate_tool_name
from simplemcp.skill.base import Skill

logger = logging.getLogger(__name__)


class SkillRegistry:
    """Registry for available tools.

    Tools are stored in insertion order, which is also the order reported by
    get_definitions(). Registering an existing name replaces the handler in
    place without changing its position.

    Attributes:
        _skills: Dictionary mapping tool names to skill instances.
    """

    def __init__(self) -> None:
        self._skills: dict[str, Skill] = {}

    def register(self, name: str, skill: Skill) -> None:
        """Register a skill under a name, replacing any existing entry.

        Args:
            name: The name clients use in tools/call.
            skill: The handler instance.

        Raises:
            ToolNameError: If the name is invalid (must be 1-64 chars,
                start with letter/underscore, contain only alphanumeric/_/-).
        """
        validate_tool_name(name)
        self._skills[name] = skill
        logger.info("Registered tool: %s", name)

    def get(self, name: str) -> Skill | None:
        """Look up a skill by name.

        Returns:
            The skill instance, or None if no skill is registered with that name.
        """
        return self._skills.get(name)

    def get_definitions(self) -> list[dict[str, Any]]:
        """Get tool descriptors for all registered skills.

        The registered name wins over the skill's own name, since it is the
        key clients must send back in tools/call.

        Returns:
            List of descriptors, each with the structure:
            {
                "name": "tool_name",
                "description": "tool description",
                "inputSchema": {...json schema...}
            }
        """
        definitions = []
        for name, skill in self._skills.items():
            descriptor = dict(skill.describe())
            descriptor["name"] = name
            definitions.append(descriptor)
        return definitions

    @property
    def names(self) -> list[str]:
        """List registered tool names."""
        return list(self._skills.keys())

    def __contains__(self, name: object) -> bool:
        return name in self._skills

    def __len__(self) -> int:
        return len(self._skills)
