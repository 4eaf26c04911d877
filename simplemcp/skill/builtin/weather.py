"""Simulated weather lookup."""

from typing import Any

from simplemcp.core.types import ToolResult
from simplemcp.skill.base import BaseSkill, object_schema, string_property

# Canned conditions; there is no weather backend behind this tool
WEATHER_DATA: dict[str, str] = {
    "Moscow": "-5°C, snow",
    "London": "8°C, rain",
    "New York": "12°C, cloudy",
    "Tokyo": "15°C, clear",
    "Sydney": "25°C, sunny",
    "Paris": "10°C, fog",
    "Berlin": "6°C, overcast",
}

DEFAULT_WEATHER = "20°C, partly cloudy"


class WeatherSkill(BaseSkill):
    """Report (simulated) current weather for a city."""

    def __init__(self) -> None:
        super().__init__(
            name="get_weather",
            description="Get current weather for a city",
            parameters=object_schema(
                {"city": string_property("City name")},
                required=["city"],
            ),
        )

    async def run(self, city: str = "", **kwargs: Any) -> ToolResult:
        weather = WEATHER_DATA.get(city, DEFAULT_WEATHER)
        return ToolResult.from_text(f"Weather in {city}: {weather}")
