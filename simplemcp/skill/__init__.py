"""Skill (tool) system for simplemcp.

This module provides the tool infrastructure:
- Skill protocol and BaseSkill for implementing tools
- SkillRegistry for managing available tools
- Built-in tools (weather, time, calculator, webpage)

Example:
    from simplemcp.skill import SkillRegistry
    from simplemcp.skill.builtin import register_builtin_skills

    registry = SkillRegistry()
    register_builtin_skills(registry)

    tools = registry.get_definitions()
"""

from simplemcp.skill.base import BaseSkill, Skill, validate_arguments
from simplemcp.skill.errors import (
    InvalidArgumentsError,
    SkillError,
    ToolExecutionError,
    ToolNotFoundError,
)
from simplemcp.skill.registry import SkillRegistry

__all__ = [
    "Skill",
    "BaseSkill",
    "validate_arguments",
    "SkillRegistry",
    "SkillError",
    "InvalidArgumentsError",
    "ToolExecutionError",
    "ToolNotFoundError",
]
