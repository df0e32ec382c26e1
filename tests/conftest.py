"""Pytest configuration and shared fixtures."""

from django.test import Client

import pytest


@pytest.fixture
def api_client():
    """Provide Django test client."""
    return Client()


@pytest.fixture
def cron_client(settings):
    """Test client that sends the configured cron secret."""
    return Client(HTTP_AUTHORIZATION=f"Bearer {settings.CRON_SECRET}")
