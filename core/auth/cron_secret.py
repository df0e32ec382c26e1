"""Shared-secret authentication for the scheduled sweep trigger.

The cron caller sends "Authorization: Bearer <CRON_SECRET>". When no secret
is configured the trigger is open, which is how local development runs it.
"""

import hmac

from django.conf import settings

import structlog
from rest_framework import authentication, exceptions

logger = structlog.get_logger(__name__)


class CronCaller:
    """Principal attached to requests that presented the cron secret."""

    is_authenticated = True

    def __str__(self):
        """String representation."""
        return "CronCaller"


class CronSecretAuthentication(authentication.BaseAuthentication):
    """Bearer authentication against settings.CRON_SECRET."""

    keyword = "Bearer"

    def authenticate(self, request):
        """Authenticate the request using the cron secret.

        Args:
            request: DRF request object

        Returns:
            (CronCaller, None) on success, or None when no secret is configured

        Raises:
            AuthenticationFailed: If the header is missing or the secret differs
        """
        secret = settings.CRON_SECRET
        if not secret:
            return None

        parts = request.headers.get("authorization", "").split()
        if len(parts) != 2 or parts[0].lower() != self.keyword.lower():
            logger.warning("cron_auth_missing_bearer", path=request.path)
            raise exceptions.AuthenticationFailed("Unauthorized")

        if not hmac.compare_digest(parts[1].encode(), secret.encode()):
            logger.warning("cron_auth_invalid_secret", path=request.path)
            raise exceptions.AuthenticationFailed("Unauthorized")

        return (CronCaller(), None)

    def authenticate_header(self, request):
        """Advertise the scheme so failures are answered with 401."""
        return self.keyword
