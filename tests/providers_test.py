from __future__ import annotations

import random

import pytest
import requests

from krishi.core.abstractions import WeatherSource
from krishi.core.providers.base import RequestConfig
from krishi.core.providers.openweather import OpenWeatherProvider
from krishi.core.providers.synthetic import SEASON_DESCRIPTIONS, SyntheticWeatherProvider
from krishi.core.seasons import ClimateSeason


OWM_URL = "https://owm.test/data/2.5/weather"
JSON_HEADERS = {"Content-Type": "application/json; charset=utf-8"}

MUMBAI_PAYLOAD = {
    "name": "Mumbai",
    "sys": {"country": "IN"},
    "main": {"temp": 30.6, "humidity": 74},
    "weather": [{"description": "haze", "icon": "50d"}],
    "wind": {"speed": 4.1},
    "rain": {"1h": 0.8},
}


def make_provider(**kwargs) -> OpenWeatherProvider:
    kwargs.setdefault("api_key", "test-key")
    return OpenWeatherProvider(base_url=OWM_URL, **kwargs)


def test_openweather_normalization(requests_mock):
    requests_mock.get(OWM_URL, json=MUMBAI_PAYLOAD, headers=JSON_HEADERS)

    result = make_provider().fetch_current("Mumbai,IN")

    assert result.ok
    reading = result.reading
    assert reading.temperature_celsius == 31
    assert reading.humidity_percent == 74
    assert reading.description == "haze"
    assert reading.wind_speed_kmh == 15
    assert reading.rainfall_mm == 0.8
    assert reading.city == "Mumbai"
    assert reading.country == "IN"
    assert reading.icon_code == "50d"
    assert reading.source is WeatherSource.UPSTREAM


def test_openweather_sends_query_and_timeout(requests_mock):
    requests_mock.get(OWM_URL, json=MUMBAI_PAYLOAD, headers=JSON_HEADERS)

    make_provider(request_config=RequestConfig(timeout=2.5)).fetch_current("Mumbai,IN")

    request = requests_mock.last_request
    assert request.qs["q"] == ["mumbai,in"]
    assert request.qs["units"] == ["metric"]
    assert request.timeout == 2.5
    assert request.headers["User-Agent"] == "KrishiAI/1.0"


def test_openweather_defaults_missing_rain_and_wind(requests_mock):
    payload = {key: value for key, value in MUMBAI_PAYLOAD.items() if key not in ("rain", "wind")}
    requests_mock.get(OWM_URL, json=payload, headers=JSON_HEADERS)

    reading = make_provider().fetch_current("Mumbai,IN").reading

    assert reading.rainfall_mm == 0
    assert reading.wind_speed_kmh == 0


def test_openweather_without_credential_makes_no_call(requests_mock):
    result = make_provider(api_key=None).fetch_current("Mumbai,IN")

    assert not result.ok
    assert result.error == "missing credential"
    assert requests_mock.call_count == 0


@pytest.mark.parametrize(
    "mock_kwargs, reason",
    [
        ({"status_code": 500, "text": "server error"}, "HTTP 500"),
        ({"status_code": 401, "json": {"message": "bad key"}, "headers": JSON_HEADERS}, "HTTP 401"),
        ({"status_code": 429, "text": "quota"}, "quota exceeded"),
        ({"status_code": 200, "text": "<html></html>", "headers": {"Content-Type": "text/html"}}, "unexpected content type 'text/html'"),
        ({"status_code": 200, "text": "{not json", "headers": JSON_HEADERS}, "invalid json"),
        ({"status_code": 200, "json": {"name": "Mumbai"}, "headers": JSON_HEADERS}, "malformed payload"),
        ({"exc": requests.exceptions.ConnectTimeout}, "timeout"),
        ({"exc": requests.exceptions.ConnectionError}, "request failed"),
    ],
)
def test_openweather_failures_become_results(requests_mock, mock_kwargs, reason):
    requests_mock.get(OWM_URL, **mock_kwargs)

    result = make_provider().fetch_current("Mumbai,IN")

    assert not result.ok
    assert result.reading is None
    assert result.error == reason
    assert requests_mock.call_count == 1


def test_synthetic_mumbai_stays_within_base_band(fixed_day):
    provider = SyntheticWeatherProvider(rng=random.Random(7), today=fixed_day(1))

    for _ in range(200):
        reading = provider.generate("mumbai")
        assert 27 <= reading.temperature_celsius <= 31
        assert 65 <= reading.humidity_percent <= 80
        assert 8 <= reading.wind_speed_kmh <= 15
        assert reading.rainfall_mm in (0, 1, 2)
        assert reading.description in SEASON_DESCRIPTIONS[ClimateSeason.WINTER]
        assert reading.city == "Mumbai"
        assert reading.country == "IN"
        assert reading.icon_code == "01d"
        assert reading.source is WeatherSource.SYNTHETIC


def test_synthetic_unknown_city_uses_default_base(fixed_day):
    provider = SyntheticWeatherProvider(rng=random.Random(3), today=fixed_day(7))

    temperatures = {provider.generate("  shimla ").temperature_celsius for _ in range(200)}

    assert temperatures <= set(range(25, 30))
    assert provider.generate("shimla").city == "Shimla"


def test_synthetic_output_is_repeatable_for_a_seed(fixed_day):
    first = SyntheticWeatherProvider(rng=random.Random(42), today=fixed_day(8))
    second = SyntheticWeatherProvider(rng=random.Random(42), today=fixed_day(8))

    assert [first.generate("pune") for _ in range(5)] == [second.generate("pune") for _ in range(5)]


@pytest.mark.parametrize(
    "month, season",
    [
        (1, ClimateSeason.WINTER),
        (4, ClimateSeason.SUMMER),
        (7, ClimateSeason.MONSOON),
        (10, ClimateSeason.POST_MONSOON),
        (12, ClimateSeason.WINTER),
    ],
)
def test_synthetic_description_follows_season(fixed_day, month, season):
    provider = SyntheticWeatherProvider(rng=random.Random(month), today=fixed_day(month))

    descriptions = {provider.generate("delhi").description for _ in range(50)}

    assert descriptions <= set(SEASON_DESCRIPTIONS[season])


def test_synthetic_rain_is_mostly_dry(fixed_day):
    provider = SyntheticWeatherProvider(rng=random.Random(99), today=fixed_day(7))

    rainfall = [provider.generate("patna").rainfall_mm for _ in range(2000)]
    dry_share = rainfall.count(0) / len(rainfall)

    # 0.75 dry plus a third of the wet draws landing on zero.
    assert 0.78 < dry_share < 0.88
