from datetime import datetime, tzinfo
from typing import Callable, Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field

from tools.base import Tool, ToolResult, tool_errors


class TimeInput(BaseModel):
    format: Literal["time", "date", "datetime", "timestamp", "timezone"] = Field(
        description="The time format to return"
    )
    timezone: str = Field(
        default="",
        description='Timezone (e.g., "America/New_York", "UTC", leave empty for local timezone)',
    )


def _zone(name: str) -> Optional[tzinfo]:
    name = name.strip()
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown timezone {name!r}") from exc


def _clock_time(now: datetime) -> str:
    return now.strftime("%I:%M:%S %p").lstrip("0")


def _calendar_date(now: datetime) -> str:
    return f"{now.month}/{now.day}/{now.year}"


class TimeTool(Tool):
    name = "get_time"
    description = "Get current time, date, or timezone information"
    input_model = TimeInput
    error_prefix = "Error getting time"

    def __init__(self, now: Optional[Callable[[Optional[tzinfo]], datetime]] = None):
        self._now = now or (lambda tz: datetime.now(tz).astimezone(tz))

    @tool_errors
    async def invoke(self, params: TimeInput) -> ToolResult:
        zone = _zone(params.timezone)
        now = self._now(zone)

        if params.format == "time":
            text = f"Current time: {_clock_time(now)}"
        elif params.format == "date":
            text = f"Current date: {_calendar_date(now)}"
        elif params.format == "timestamp":
            text = f"Unix timestamp: {int(now.timestamp())}"
        elif params.format == "timezone":
            label = params.timezone.strip() or now.tzname() or "local"
            text = f"Current timezone: {label}"
        else:
            text = f"Current date and time: {_calendar_date(now)}, {_clock_time(now)}"
        return ToolResult.success(self.name, text)
