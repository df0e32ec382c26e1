"""ASGI config for the review reminder service."""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "review_service.settings")

application = get_asgi_application()
