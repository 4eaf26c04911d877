"""Current time in a given timezone."""

from datetime import UTC, datetime, tzinfo
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from simplemcp.core.types import ToolResult
from simplemcp.skill.base import BaseSkill, object_schema, string_property
from simplemcp.skill.errors import ToolExecutionError

LOCAL_NAME = "Local"


def resolve_timezone(name: str) -> tzinfo | None:
    """Resolve a timezone name.

    "" and "Local" mean the system timezone (returned as None). "UTC" needs
    no tz database.

    Raises:
        ValueError: If the name is not a known IANA timezone.
    """
    if name in ("", LOCAL_NAME):
        return None
    if name == "UTC":
        return UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise ValueError(name) from e


def format_time(moment: datetime) -> str:
    """Format as "15:04:05 UTC, Monday, January 2, 2006"."""
    return (
        f"{moment:%H:%M:%S} {moment.tzname()}, "
        f"{moment:%A}, {moment:%B} {moment.day}, {moment.year}"
    )


class TimeSkill(BaseSkill):
    """Report the current time, optionally in a named timezone."""

    def __init__(self) -> None:
        super().__init__(
            name="get_time",
            description="Get current time in different timezones",
            parameters=object_schema(
                {
                    "timezone": string_property(
                        "Timezone (e.g., UTC, America/New_York, Europe/London)"
                    ),
                },
            ),
        )

    async def run(self, timezone: str = "", **kwargs: Any) -> ToolResult:
        try:
            tz = resolve_timezone(timezone)
        except ValueError as e:
            raise ToolExecutionError(self.name, f"invalid timezone: {timezone}") from e

        now = datetime.now(tz) if tz is not None else datetime.now().astimezone()
        location = timezone or LOCAL_NAME
        return ToolResult.from_text(f"Current time in {location}: {format_time(now)}")
