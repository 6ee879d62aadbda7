import math
from dataclasses import dataclass
from typing import Any, Dict

from datasources.base import BaseConnector
from datasources.exceptions import EmptyResponse
from datasources.helpers import fetch_json


@dataclass(frozen=True)
class WeatherData:
    location: str
    temperature: int
    description: str
    icon: str
    humidity: float
    wind_speed: float
    feels_like: int


def _round_half_up(value: Any) -> int:
    return int(math.floor(float(value) + 0.5))


class VisualCrossingConnector(BaseConnector):
    service_name = "Visual Crossing"
    credential_env = "VISUAL_CROSSING_API_KEY"

    async def current(self, lat: float, lon: float) -> WeatherData:
        key = self._require_key()
        url = f"{self.base_url}/{lat},{lon}"
        params: Dict[str, Any] = {
            "unitGroup": "metric",
            "include": "current",
            "key": key,
            "contentType": "json",
        }
        data = await fetch_json(
            url,
            params=params,
            headers=self._headers(),
            timeout=self.timeout,
            invalid_msg="Weather API error",
            timeout_msg="Weather API timed out",
            unavailable_msg="Cannot reach weather service at",
        )
        current = data.get("currentConditions") or {}
        if not current:
            raise EmptyResponse("Weather API returned no current conditions")
        return WeatherData(
            location=data.get("resolvedAddress") or f"{lat},{lon}",
            temperature=_round_half_up(current.get("temp", 0.0)),
            description=current.get("conditions", ""),
            icon=current.get("icon", ""),
            humidity=current.get("humidity", 0.0),
            wind_speed=current.get("windspeed", 0.0),
            feels_like=_round_half_up(current.get("feelslike", current.get("temp", 0.0))),
        )
