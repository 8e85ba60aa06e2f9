from __future__ import annotations

import random
from datetime import date

import pytest

from krishi.api.views import get_weather_resolver


@pytest.fixture(autouse=True)
def _fresh_resolver():
    get_weather_resolver.cache_clear()
    yield
    get_weather_resolver.cache_clear()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fixed_day():
    def factory(month: int, day: int = 15, year: int = 2024):
        return lambda: date(year, month, day)

    return factory
