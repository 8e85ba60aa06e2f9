"""Synthetic weather built from Indian climate patterns and the current season."""
from __future__ import annotations

import random
from datetime import date
from typing import Callable, Mapping, Optional, Tuple

from krishi.core.abstractions import WeatherReading, WeatherSource
from krishi.core.seasons import ClimateSeason, climate_season


DEFAULT_BASE_TEMP = 27

BASE_TEMPERATURES: Mapping[str, int] = {
    "mumbai": 29,
    "delhi": 25,
    "bangalore": 24,
    "hyderabad": 28,
    "pune": 26,
    "kolkata": 27,
    "chennai": 30,
    "ahmedabad": 32,
    "jaipur": 28,
    "lucknow": 26,
    "patna": 26,
    "bhopal": 25,
    "indore": 27,
    "nagpur": 28,
    "raipur": 26,
}

SEASON_DESCRIPTIONS: Mapping[ClimateSeason, Tuple[str, ...]] = {
    ClimateSeason.WINTER: ("clear sky", "few clouds", "mist", "haze"),
    ClimateSeason.SUMMER: ("clear sky", "scattered clouds", "haze", "hot"),
    ClimateSeason.MONSOON: ("light rain", "moderate rain", "overcast clouds", "thunderstorm"),
    ClimateSeason.POST_MONSOON: ("clear sky", "few clouds", "partly cloudy"),
}


class SyntheticWeatherProvider:
    """Generates a plausible reading when no live data is available.

    ``rng`` and ``today`` are injectable so a seeded generator and a fixed
    date give exact, repeatable output.
    """

    name = "synthetic"
    country = "IN"
    icon_code = "01d"
    dry_probability = 0.75

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.rng = rng or random.Random()
        self.today = today

    def generate(self, location: str) -> WeatherReading:
        key = location.lower().strip()
        base = BASE_TEMPERATURES.get(key, DEFAULT_BASE_TEMP)
        display = location.strip()
        return WeatherReading(
            temperature_celsius=base + self.rng.randint(-2, 2),
            humidity_percent=self.rng.randint(65, 80),
            description=self._seasonal_description(),
            wind_speed_kmh=self.rng.randint(8, 15),
            rainfall_mm=self._rainfall(),
            city=display[:1].upper() + display[1:],
            country=self.country,
            icon_code=self.icon_code,
            source=WeatherSource.SYNTHETIC,
        )

    def _rainfall(self) -> float:
        if self.rng.random() < self.dry_probability:
            return 0
        return self.rng.randrange(0, 3)

    def _seasonal_description(self) -> str:
        season = climate_season(self.today().month)
        return self.rng.choice(SEASON_DESCRIPTIONS[season])


__all__ = ["BASE_TEMPERATURES", "DEFAULT_BASE_TEMP", "SEASON_DESCRIPTIONS", "SyntheticWeatherProvider"]
