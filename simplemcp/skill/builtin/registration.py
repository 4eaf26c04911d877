"""Registration of the built-in tools."""

from __future__ import annotations

from simplemcp.config.schema import FetchConfig
from simplemcp.skill.builtin.calculator import CalculatorSkill
from simplemcp.skill.builtin.time_tool import TimeSkill
from simplemcp.skill.builtin.weather import WeatherSkill
from simplemcp.skill.builtin.webpage import WebPageSkill
from simplemcp.skill.registry import SkillRegistry


def register_builtin_skills(
    registry: SkillRegistry,
    fetch: FetchConfig | None = None,
) -> None:
    """Register all built-in tools with the registry.

    Args:
        registry: The registry to populate.
        fetch: Settings for fetch_webpage. Defaults to FetchConfig().
    """
    fetch = fetch or FetchConfig()

    for skill in (
        WeatherSkill(),
        TimeSkill(),
        CalculatorSkill(),
        WebPageSkill(
            timeout=fetch.timeout,
            user_agent=fetch.user_agent,
            max_content_length=fetch.max_content_length,
        ),
    ):
        registry.register(skill.name, skill)
