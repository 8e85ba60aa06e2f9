"""Base Django settings for the Krishi agricultural assistant API."""
from __future__ import annotations

from pathlib import Path
import os

from django.core.exceptions import ImproperlyConfigured

BASE_DIR = Path(__file__).resolve().parent.parent


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "krishi.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "krishi.urls"

WSGI_APPLICATION = "krishi.wsgi.application"

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Nothing is persisted; the database only satisfies contrib.auth's app registry.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.environ.get("DB_NAME", str(BASE_DIR / "db.sqlite3")),
    }
}

OPENWEATHER_API_KEY = os.environ.get("OPENWEATHER_API_KEY") or None
OPENWEATHER_BASE_URL = os.environ.get(
    "OPENWEATHER_BASE_URL", "https://api.openweathermap.org/data/2.5/weather"
)
WEATHER_UPSTREAM_TIMEOUT = float(os.environ.get("WEATHER_UPSTREAM_TIMEOUT", "4"))
WEATHER_DEFAULT_REGION = os.environ.get("WEATHER_DEFAULT_REGION", "Maharashtra")

SOIL_MISSING_VALUE_POLICY = os.environ.get("SOIL_MISSING_VALUE_POLICY", "zero")
if SOIL_MISSING_VALUE_POLICY not in ("zero", "reject"):
    raise ImproperlyConfigured("SOIL_MISSING_VALUE_POLICY must be 'zero' or 'reject'")

SCAN_MAX_UPLOAD_BYTES = int(os.environ.get("SCAN_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))
# Uploads up to the scan limit stay in memory.
FILE_UPLOAD_MAX_MEMORY_SIZE = SCAN_MAX_UPLOAD_BYTES

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
        "rest_framework.parsers.MultiPartParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "krishi": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "django.request": {"handlers": ["console"], "level": "WARNING"},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True
