"""Calendar-month season bands used by the weather fallback and advisories."""
from __future__ import annotations

from enum import Enum


class ClimateSeason(str, Enum):
    WINTER = "winter"
    SUMMER = "summer"
    MONSOON = "monsoon"
    POST_MONSOON = "post-monsoon"


class CroppingSeason(str, Enum):
    KHARIF = "kharif"
    RABI = "rabi"
    ZAID = "zaid"


def climate_season(month: int) -> ClimateSeason:
    """Map a 1-12 month to its weather season band."""
    if month == 12 or month <= 2:
        return ClimateSeason.WINTER
    if 6 <= month <= 9:
        return ClimateSeason.MONSOON
    if 10 <= month <= 11:
        return ClimateSeason.POST_MONSOON
    return ClimateSeason.SUMMER


def cropping_season(month: int) -> CroppingSeason:
    """Map a 1-12 month to the sowing season.

    Kharif runs June-September and Rabi November-March; April, May and
    October fall to Zaid.
    """
    if 6 <= month <= 9:
        return CroppingSeason.KHARIF
    if month >= 11 or month <= 3:
        return CroppingSeason.RABI
    return CroppingSeason.ZAID


__all__ = ["ClimateSeason", "CroppingSeason", "climate_season", "cropping_season"]
