"""Rule-based soil health scoring and the advisory report built on it."""
from __future__ import annotations

from typing import Dict, List, Mapping, Tuple

from krishi.core.abstractions import SoilFlag, SoilHealthResult, SoilSample


MAX_SCORE = 100
CRITICAL_BELOW = 50

# (lower, upper, points), bounds inclusive. First match wins.
Band = Tuple[float, float, int]
OPEN = float("inf")

PH_BANDS: Tuple[Band, ...] = ((6.0, 7.5, 20), (5.5, 8.0, 15))
NITROGEN_BANDS: Tuple[Band, ...] = ((150, 300, 20), (100, OPEN, 10))
PHOSPHORUS_BANDS: Tuple[Band, ...] = ((15, 40, 20), (10, OPEN, 10))
POTASSIUM_BANDS: Tuple[Band, ...] = ((120, 250, 20), (80, OPEN, 10))
ORGANIC_MATTER_BANDS: Tuple[Band, ...] = ((2.5, OPEN, 20), (1.5, OPEN, 15))

FLAG_ADVICE: Mapping[SoilFlag, str] = {
    SoilFlag.PH_LOW: "मिट्टी में चूना डालें - एसिडिटी कम करने के लिए",
    SoilFlag.PH_HIGH: "जिप्सम का उपयोग करें - क्षारीयता कम करने के लिए",
    SoilFlag.NITROGEN: "नाइट्रोजन की कमी - यूरिया या वर्मी कंपोस्ट डालें",
    SoilFlag.PHOSPHORUS: "फास्फोरस की कमी - SSP या DAP का उपयोग करें",
    SoilFlag.POTASSIUM: "पोटाश की कमी - MOP या SOP डालें",
    SoilFlag.ORGANIC_MATTER: "जैविक खाद बढ़ाएं - गोबर खाद या कंपोस्ट डालें",
}
CRITICAL_ALERT = "मिट्टी की स्थिति खराब है - तुरंत सुधार की आवश्यकता"
STANDARD_DOSE = "Apply urea (46-0-0) at 120-150 kg/hectare"

SUITABLE_CROPS = (
    "धान", "गेहूं", "मक्का", "कपास", "सोयाबीन", "गन्ना",
    "केला", "नारियल", "जौ", "चना", "मटर", "सरसों",
    "ज्वार", "बाजरा", "अरहर",
)
ORGANIC_FERTILIZERS = (
    "गोबर की खाद - 5-10 टन प्रति हेक्टेयर",
    "वर्मी कंपोस्ट - 2-3 टन प्रति हेक्टेयर",
    "हरी खाद - सनई, ढैंचा उगाकर मिट्टी में मिलाएं",
)


def band_points(value: float, bands: Tuple[Band, ...], floor: int) -> int:
    """Points for the first band containing ``value`` (bounds inclusive)."""
    for lower, upper, points in bands:
        if lower <= value <= upper:
            return points
    return floor


class SoilHealthScorer:
    """Weighted five-criterion soil score with threshold advisory flags.

    A NaN measurement matches no band and trips no threshold, so it scores
    the minimum tier without raising.
    """

    def score(self, sample: SoilSample) -> SoilHealthResult:
        total = (
            band_points(sample.ph, PH_BANDS, 5)
            + band_points(sample.nitrogen, NITROGEN_BANDS, 0)
            + band_points(sample.phosphorus, PHOSPHORUS_BANDS, 0)
            + band_points(sample.potassium, POTASSIUM_BANDS, 0)
            + band_points(sample.organic_matter_percent, ORGANIC_MATTER_BANDS, 5)
        )
        health_score = max(0, min(total, MAX_SCORE))
        flags = self.deficiency_flags(sample)
        if health_score < CRITICAL_BELOW:
            flags.append(SoilFlag.CRITICAL)
        return SoilHealthResult(health_score=health_score, deficiency_flags=tuple(flags))

    @staticmethod
    def deficiency_flags(sample: SoilSample) -> List[SoilFlag]:
        checks = (
            (SoilFlag.PH_LOW, sample.ph < 6.0),
            (SoilFlag.PH_HIGH, sample.ph > 8.0),
            (SoilFlag.NITROGEN, sample.nitrogen < 150),
            (SoilFlag.PHOSPHORUS, sample.phosphorus < 15),
            (SoilFlag.POTASSIUM, sample.potassium < 120),
            (SoilFlag.ORGANIC_MATTER, sample.organic_matter_percent < 2.0),
        )
        return [flag for flag, triggered in checks if triggered]


def urea_dose(nitrogen: float) -> float:
    return max(130, 200 - nitrogen)


def build_soil_report(sample: SoilSample, result: SoilHealthResult) -> Dict[str, object]:
    """Expand a score into the farmer-facing soil analysis."""
    recommendations = [
        FLAG_ADVICE[flag] for flag in result.deficiency_flags if flag is not SoilFlag.CRITICAL
    ]
    recommendations.append(STANDARD_DOSE)
    dose = urea_dose(sample.nitrogen)
    if float(dose).is_integer():
        dose = int(dose)
    return {
        **result.as_dict(),
        "recommendations": recommendations,
        "suitableCrops": list(SUITABLE_CROPS),
        "fertilizer": {
            "organic": list(ORGANIC_FERTILIZERS),
            "chemical": [f"यूरिया (46% N) - {dose} किलो प्रति हेक्टेयर"],
        },
        "irrigation": {
            "frequency": "सप्ताह में 3-4 बार" if sample.moisture_percent < 20 else "सप्ताह में 2-3 बार",
            "amount": "25-30 मिमी प्रति सिंचाई",
            "method": "फ्लड इरिगेशन",
        },
        "alerts": [CRITICAL_ALERT] if SoilFlag.CRITICAL in result.deficiency_flags else [],
    }


__all__ = [
    "FLAG_ADVICE",
    "SoilHealthScorer",
    "band_points",
    "build_soil_report",
    "urea_dose",
]
