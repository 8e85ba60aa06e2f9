"""Core abstractions for the weather and soil domains."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple


class WeatherSource(str, Enum):
    """Where a weather reading came from."""

    UPSTREAM = "UpstreamProvider"
    SYNTHETIC = "SyntheticFallback"


@dataclass(frozen=True)
class WeatherReading:
    """Normalized current weather.

    Units are fixed so upstream and synthetic readings are interchangeable:
    - temperature in whole degrees Celsius
    - wind speed in whole kilometres per hour
    - rainfall in millimetres
    """

    temperature_celsius: int
    humidity_percent: int
    description: str
    wind_speed_kmh: int
    rainfall_mm: float
    city: str
    country: str
    icon_code: str
    source: WeatherSource

    def as_dict(self) -> Dict[str, Any]:
        return {
            "temperatureCelsius": self.temperature_celsius,
            "humidityPercent": self.humidity_percent,
            "description": self.description,
            "windSpeedKmh": self.wind_speed_kmh,
            "rainfallMm": self.rainfall_mm,
            "city": self.city,
            "country": self.country,
            "iconCode": self.icon_code,
            "source": self.source.value,
        }


@dataclass(frozen=True)
class UpstreamResult:
    """Outcome of a single upstream weather call.

    Exactly one of ``reading`` and ``error`` is set.
    """

    reading: Optional[WeatherReading] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.reading is not None

    @classmethod
    def success(cls, reading: WeatherReading) -> "UpstreamResult":
        return cls(reading=reading)

    @classmethod
    def failure(cls, reason: str) -> "UpstreamResult":
        return cls(error=reason)


class CurrentWeatherProvider(Protocol):
    """A live data source for current conditions."""

    name: str

    def fetch_current(self, location: str) -> UpstreamResult:
        """Fetch current conditions for a canonical ``City,CC`` location."""
        ...


class MissingValuePolicy(str, Enum):
    ZERO = "zero"
    REJECT = "reject"


class MissingSoilValue(ValueError):
    """Raised when a soil measurement is absent under the ``reject`` policy."""

    def __init__(self, fields: Tuple[str, ...]) -> None:
        super().__init__("missing soil measurements: " + ", ".join(fields))
        self.fields = fields


@dataclass(frozen=True)
class SoilSample:
    """Measured soil chemistry. Values are scored as-is, never range-checked."""

    ph: float
    nitrogen: float
    phosphorus: float
    potassium: float
    organic_matter_percent: float
    moisture_percent: float = 0.0
    temperature_celsius: float = 0.0
    region: Optional[str] = None

    # Wire name -> attribute name for the measured values.
    WIRE_FIELDS = (
        ("pH", "ph"),
        ("nitrogen", "nitrogen"),
        ("phosphorus", "phosphorus"),
        ("potassium", "potassium"),
        ("organicMatter", "organic_matter_percent"),
        ("moisture", "moisture_percent"),
        ("temperature", "temperature_celsius"),
    )

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        policy: MissingValuePolicy = MissingValuePolicy.ZERO,
    ) -> "SoilSample":
        """Build a sample from camelCase wire data, applying ``policy`` to gaps."""
        values: Dict[str, float] = {}
        missing = []
        for wire_name, attr in cls.WIRE_FIELDS:
            raw = data.get(wire_name)
            if raw is None:
                missing.append(wire_name)
                values[attr] = 0.0
            else:
                values[attr] = float(raw)
        if missing and policy is MissingValuePolicy.REJECT:
            raise MissingSoilValue(tuple(missing))
        return cls(region=data.get("region"), **values)


class SoilFlag(str, Enum):
    """Advisory identifiers, declared in evaluation order."""

    PH_LOW = "ph-low"
    PH_HIGH = "ph-high"
    NITROGEN = "nitrogen"
    PHOSPHORUS = "phosphorus"
    POTASSIUM = "potassium"
    ORGANIC_MATTER = "organic-matter"
    CRITICAL = "critical"


@dataclass(frozen=True)
class SoilHealthResult:
    health_score: int
    deficiency_flags: Tuple[SoilFlag, ...] = field(default_factory=tuple)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "healthScore": self.health_score,
            "deficiencyFlags": [flag.value for flag in self.deficiency_flags],
        }


__all__ = [
    "CurrentWeatherProvider",
    "MissingSoilValue",
    "MissingValuePolicy",
    "SoilFlag",
    "SoilHealthResult",
    "SoilSample",
    "UpstreamResult",
    "WeatherReading",
    "WeatherSource",
]
