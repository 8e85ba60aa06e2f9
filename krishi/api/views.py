"""REST API views for weather and soil analysis."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from functools import lru_cache
from typing import Optional

from django.conf import settings
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from krishi.core.abstractions import MissingSoilValue, MissingValuePolicy, SoilSample
from krishi.core.providers.base import RequestConfig
from krishi.core.providers.openweather import OpenWeatherProvider
from krishi.core.services.advisory import build_weather_report
from krishi.core.services.soil import SoilHealthScorer, build_soil_report
from krishi.core.services.weather_service import WeatherResolver
from krishi.api.serializers import SoilAnalysisSerializer


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_weather_resolver() -> WeatherResolver:
    upstream: Optional[OpenWeatherProvider] = None
    if settings.OPENWEATHER_API_KEY:
        upstream = OpenWeatherProvider(
            api_key=settings.OPENWEATHER_API_KEY,
            base_url=settings.OPENWEATHER_BASE_URL,
            request_config=RequestConfig(timeout=settings.WEATHER_UPSTREAM_TIMEOUT),
        )
    return WeatherResolver(upstream=upstream)


def invalid_request(message: str, errors=None, code: int = status.HTTP_400_BAD_REQUEST) -> Response:
    payload = {"success": False, "message": message}
    if errors:
        payload["errors"] = errors
    return Response(payload, status=code)


def utc_timestamp() -> str:
    return datetime.now(tz=timezone.utc).isoformat().replace("+00:00", "Z")


class WeatherView(APIView):
    """Current weather for a location plus farming advice derived from it."""

    def get(self, request, location: str, *args, **kwargs):  # noqa: D401
        """Return weather, insights and crop recommendations for ``location``."""
        location = location.strip()
        if not location:
            return invalid_request("location is required")
        region = request.query_params.get("region") or settings.WEATHER_DEFAULT_REGION

        reading = get_weather_resolver().resolve(location)
        payload = build_weather_report(reading, region)
        payload["status"] = "success"
        payload["message"] = f"Weather data for {location} ({reading.source.value})"
        return Response(payload, status=status.HTTP_200_OK)


class SoilAnalysisView(APIView):
    """Score a soil sample and expand it into fertilizer and irrigation advice."""

    scorer = SoilHealthScorer()

    def post(self, request, *args, **kwargs):
        serializer = SoilAnalysisSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_request("Invalid soil data", serializer.errors)

        policy = MissingValuePolicy(settings.SOIL_MISSING_VALUE_POLICY)
        try:
            sample = SoilSample.from_mapping(serializer.validated_data, policy=policy)
        except MissingSoilValue as exc:
            return invalid_request(str(exc), {name: ["This field is required."] for name in exc.fields})

        result = self.scorer.score(sample)
        logger.debug("Soil sample for region %r scored %s", sample.region, result.health_score)
        return Response(
            {
                "success": True,
                "soilAnalysis": build_soil_report(sample, result),
                "timestamp": utc_timestamp(),
            },
            status=status.HTTP_200_OK,
        )
