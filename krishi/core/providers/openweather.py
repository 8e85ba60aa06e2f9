"""OpenWeatherMap current-conditions provider."""
from __future__ import annotations

from typing import Any, Dict, Optional

import requests

from krishi.core.abstractions import UpstreamResult, WeatherReading, WeatherSource
from krishi.core.providers.base import HttpWeatherProvider, ProviderError, RequestConfig


MS_TO_KMH = 3.6


class OpenWeatherProvider(HttpWeatherProvider):
    """Integration with the OpenWeather current weather endpoint."""

    name = "openweather"
    base_url = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(
        self,
        *,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        request_config: Optional[RequestConfig] = None,
    ) -> None:
        super().__init__(session=session, request_config=request_config)
        self.api_key = api_key
        self.base_url = base_url or self.base_url

    def fetch_current(self, location: str) -> UpstreamResult:
        if not self.api_key:
            return UpstreamResult.failure("missing credential")
        params = {"q": location, "appid": self.api_key, "units": "metric"}
        try:
            response = self._request("GET", self.base_url, params=params)
            reading = self._to_reading(self._json(response))
        except ProviderError as exc:
            return UpstreamResult.failure(str(exc))
        return UpstreamResult.success(reading)

    def _to_reading(self, data: Dict[str, Any]) -> WeatherReading:
        try:
            main = data["main"]
            condition = data["weather"][0]
            wind = data.get("wind") or {}
            rain = data.get("rain") or {}
            return WeatherReading(
                temperature_celsius=round(float(main["temp"])),
                humidity_percent=int(main["humidity"]),
                description=str(condition["description"]),
                wind_speed_kmh=round(float(wind.get("speed") or 0) * MS_TO_KMH),
                rainfall_mm=float(rain.get("1h") or 0),
                city=str(data["name"]),
                country=str(data["sys"]["country"]),
                icon_code=str(condition["icon"]),
                source=WeatherSource.UPSTREAM,
            )
        except (KeyError, IndexError, TypeError, ValueError) as exc:
            self._log.warning("Malformed OpenWeather payload: %r", exc)
            raise ProviderError("malformed payload") from exc


__all__ = ["OpenWeatherProvider"]
