"""Django application configuration for core."""

from django.apps import AppConfig
from django.conf import settings

import structlog

logger = structlog.get_logger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Configure structured logging once the app registry is loaded."""
        if settings.TEST_MODE:
            return

        from core.logging import setup_logging  # noqa: PLC0415

        setup_logging()
        logger.info("review_service_ready", time_zone=settings.TIME_ZONE)
