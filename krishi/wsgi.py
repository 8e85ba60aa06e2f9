"""WSGI entry point for the Krishi API."""
from __future__ import annotations

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "krishi.settings")

application = get_wsgi_application()
