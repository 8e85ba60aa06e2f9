"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from typing import Any

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from krishi.api.views import get_weather_resolver
from krishi.core.services.advisory import build_weather_report


class Command(BaseCommand):
    help = "Fetch current weather and farming advice for a location"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--location", type=str, help="City or district name")
        parser.add_argument("--region", type=str, help="State used for advisories")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        location = (options.get("location") or "").strip()
        if not location:
            raise CommandError("--location is required")
        region = options.get("region") or settings.WEATHER_DEFAULT_REGION

        reading = get_weather_resolver().resolve(location)
        payload = build_weather_report(reading, region)
        self.stdout.write(json.dumps(payload, ensure_ascii=False))
