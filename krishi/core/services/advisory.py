"""Static advisory tables keyed on weather thresholds and season.

Each advisory is a pair of strings, Hindi first and English second, emitted
together in that order.
"""
from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from krishi.core.abstractions import WeatherReading
from krishi.core.seasons import CroppingSeason, cropping_season


Advice = Tuple[str, ...]

WEATHER_ADVICE: Mapping[str, Advice] = {
    "heat-alert": (
        "उच्च तापमान चेतावनी। फसलों को छाया प्रदान करें और सिंचाई की आवृत्ति बढ़ाएं।",
        "High temperature alert. Provide shade cover for crops and increase irrigation frequency.",
    ),
    "warm": (
        "गर्म मौसम। दिन के गर्म समय में सिंचाई से बचें, सुबह या शाम को पानी दें।",
        "Warm weather. Avoid irrigation during hot hours, water in early morning or evening.",
    ),
    "cool": (
        "ठंडा मौसम। संवेदनशील फसलों को पाले से बचाएं।",
        "Cool weather. Protect sensitive crops from potential frost damage.",
    ),
    "humid": (
        "अधिक नमी से फंगल रोग का खतरा। फसलों की नियमित निगरानी करें।",
        "High humidity increases fungal disease risk. Monitor crops closely for symptoms.",
    ),
    "dry-air": (
        "कम नमी। पौधों के तनाव से बचने के लिए सिंचाई बढ़ाएं।",
        "Low humidity detected. Increase irrigation to prevent plant water stress.",
    ),
    "heavy-rain": (
        "भारी बारिश की संभावना। जल निकासी की व्यवस्था सुनिश्चित करें।",
        "Heavy rainfall expected. Ensure proper field drainage to prevent waterlogging.",
    ),
    "clear": (
        "साफ मौसम। छिड़काव और खेती के कार्य के लिए अच्छा समय।",
        "Clear weather ideal for spraying operations and field activities.",
    ),
}

SEASON_CROPS: Mapping[CroppingSeason, str] = {
    CroppingSeason.KHARIF: "Kharif crops recommended: Rice, Cotton, Sugarcane, Maize",
    CroppingSeason.RABI: "Rabi crops recommended: Wheat, Barley, Peas, Mustard",
    CroppingSeason.ZAID: "Zaid crops recommended: Fodder crops, Vegetables with irrigation",
}

PADDY_NOTE = "Good monsoon conditions for paddy cultivation"
WINTER_CROP_NOTE = "Ideal temperature conditions for winter crops"

RECOMMENDED_CROPS = ("wheat", "rice", "cotton", "maize", "sugarcane")
RECOMMENDED_VARIETIES = ("Local recommended varieties",)
STATE_INFO: Mapping[str, object] = {
    "soilType": "Mixed",
    "climate": "Varied",
    "season": "Kharif, Rabi",
    "majorCrops": ["wheat", "rice", "cotton"],
}


def _weather_categories(reading: WeatherReading) -> List[str]:
    categories: List[str] = []
    temperature = reading.temperature_celsius
    if temperature > 35:
        categories.append("heat-alert")
    elif temperature > 30:
        categories.append("warm")
    elif temperature < 15:
        categories.append("cool")

    if reading.humidity_percent > 80:
        categories.append("humid")
    elif reading.humidity_percent < 40:
        categories.append("dry-air")

    if reading.rainfall_mm > 10:
        categories.append("heavy-rain")
    elif reading.rainfall_mm < 1 and "clear" in reading.description:
        categories.append("clear")
    return categories


def get_agricultural_insights(reading: WeatherReading, region: Optional[str] = None) -> List[str]:
    """Bilingual farming advice for the conditions in ``reading``.

    ``region`` is accepted for API symmetry; the tables are not regional.
    """
    insights: List[str] = []
    for category in _weather_categories(reading):
        insights.extend(WEATHER_ADVICE[category])
    return insights


def get_crop_recommendations(
    reading: WeatherReading,
    region: Optional[str] = None,
    today: Callable[[], date] = date.today,
) -> List[str]:
    season = cropping_season(today().month)
    recommendations = [SEASON_CROPS[season]]
    if season is CroppingSeason.KHARIF and reading.rainfall_mm > 5:
        recommendations.append(PADDY_NOTE)
    elif season is CroppingSeason.RABI and reading.temperature_celsius < 25:
        recommendations.append(WINTER_CROP_NOTE)
    return recommendations


def build_weather_report(
    reading: WeatherReading,
    region: str,
    today: Callable[[], date] = date.today,
) -> Dict[str, object]:
    """Assemble the weather payload served to clients."""
    return {
        "current": reading.as_dict(),
        "insights": get_agricultural_insights(reading, region),
        "recommendations": {
            "recommendations": get_crop_recommendations(reading, region, today=today),
            "recommendedCrops": list(RECOMMENDED_CROPS),
            "recommendedVarieties": list(RECOMMENDED_VARIETIES),
            "stateInfo": dict(STATE_INFO),
        },
        "pestAlerts": [],
    }


__all__ = [
    "SEASON_CROPS",
    "WEATHER_ADVICE",
    "build_weather_report",
    "get_agricultural_insights",
    "get_crop_recommendations",
]
