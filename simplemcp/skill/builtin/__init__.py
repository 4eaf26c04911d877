"""Built-in tools."""

from simplemcp.skill.builtin.registration import register_builtin_skills

__all__ = ["register_builtin_skills"]
