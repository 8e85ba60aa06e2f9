"""Weather resolver that prefers a live provider and falls back to synthetic data."""
from __future__ import annotations

import logging
from typing import Mapping, Optional

from krishi.core.abstractions import CurrentWeatherProvider, UpstreamResult, WeatherReading
from krishi.core.providers.synthetic import SyntheticWeatherProvider


logger = logging.getLogger(__name__)


DEFAULT_COUNTRY = "IN"

INDIAN_CITIES: Mapping[str, str] = {
    "mumbai": "Mumbai,IN",
    "delhi": "Delhi,IN",
    "bangalore": "Bangalore,IN",
    "hyderabad": "Hyderabad,IN",
    "pune": "Pune,IN",
    "kolkata": "Kolkata,IN",
    "chennai": "Chennai,IN",
    "ahmedabad": "Ahmedabad,IN",
    "jaipur": "Jaipur,IN",
    "lucknow": "Lucknow,IN",
    "kanpur": "Kanpur,IN",
    "nagpur": "Nagpur,IN",
    "indore": "Indore,IN",
    "thane": "Thane,IN",
    "bhopal": "Bhopal,IN",
    "visakhapatnam": "Visakhapatnam,IN",
}


def normalize_location(location: str) -> str:
    """Return the ``City,CC`` query form of a free-text location."""
    key = location.lower().strip()
    return INDIAN_CITIES.get(key) or f"{location.strip()},{DEFAULT_COUNTRY}"


class WeatherResolver:
    """Resolve a location to current weather without ever failing."""

    def __init__(
        self,
        upstream: Optional[CurrentWeatherProvider],
        synthetic: Optional[SyntheticWeatherProvider] = None,
    ) -> None:
        self.upstream = upstream
        self.synthetic = synthetic or SyntheticWeatherProvider()

    def resolve(self, location: str) -> WeatherReading:
        result = self._fetch_upstream(location)
        if result.ok:
            return result.reading
        logger.info("Using synthetic weather for %r: %s", location, result.error)
        return self.synthetic.generate(location)

    def _fetch_upstream(self, location: str) -> UpstreamResult:
        if self.upstream is None:
            return UpstreamResult.failure("no upstream provider configured")
        try:
            return self.upstream.fetch_current(normalize_location(location))
        except Exception as exc:  # noqa: BLE001 - resolve() must stay total
            logger.warning("Weather provider %s failed: %s", self.upstream.name, exc, exc_info=True)
            return UpstreamResult.failure(f"provider error: {exc}")


__all__ = ["INDIAN_CITIES", "WeatherResolver", "normalize_location"]
