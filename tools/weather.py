from typing import Optional

from pydantic import BaseModel, Field

from config import settings
from connectors.weather import VisualCrossingConnector
from tools.base import Tool, ToolResult, tool_errors


class WeatherInput(BaseModel):
    lat: float = Field(ge=-90, le=90, description="Latitude coordinate (-90 to 90)")
    lon: float = Field(ge=-180, le=180, description="Longitude coordinate (-180 to 180)")


class WeatherTool(Tool):
    name = "get_weather"
    description = "Get current weather information for a location using latitude and longitude coordinates"
    input_model = WeatherInput
    error_prefix = "Error fetching weather data"

    def __init__(self, connector: Optional[VisualCrossingConnector] = None):
        self._connector = connector

    @property
    def connector(self) -> VisualCrossingConnector:
        return self._connector or VisualCrossingConnector(
            settings.visual_crossing_url,
            timeout=settings.http_timeout,
            api_key=settings.visual_crossing_api_key,
        )

    @tool_errors
    async def invoke(self, params: WeatherInput) -> ToolResult:
        weather = await self.connector.current(params.lat, params.lon)
        text = "\n".join([
            f"Weather for {weather.location}:",
            f"🌡️ Temperature: {weather.temperature}°C (feels like {weather.feels_like}°C)",
            f"🌤️ Condition: {weather.description}",
            f"💧 Humidity: {weather.humidity}%",
            f"💨 Wind Speed: {weather.wind_speed} km/h",
            f"☁️ Icon: {weather.icon}",
        ])
        return ToolResult.success(self.name, text)
