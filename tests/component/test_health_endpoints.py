"""Component tests for the health check endpoints."""

from unittest.mock import MagicMock, patch

from django.db.utils import OperationalError
from django.test import Client, TestCase

from redis.exceptions import ConnectionError as RedisConnectionError

from core.services.health_service import health_service


class TestHealthEndpoints(TestCase):
    """Liveness and readiness through the full request cycle."""

    def setUp(self):
        """Set up test fixtures."""
        self.client = Client()
        health_service.clear_cache()
        self.addCleanup(health_service.clear_cache)
        rq_patcher = patch("core.services.health_service.django_rq")
        self.mock_rq = rq_patcher.start()
        self.addCleanup(rq_patcher.stop)
        self.redis = MagicMock()
        self.mock_rq.get_connection.return_value = self.redis

    def test_liveness(self):
        response = self.client.get("/api/v1/reviews/health/live")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "alive"})

    def test_liveness_carries_tracing_headers(self):
        response = self.client.get(
            "/api/v1/reviews/health/live", HTTP_X_REQUEST_ID="probe-1"
        )

        self.assertEqual(response["X-Request-ID"], "probe-1")
        self.assertIn("X-Process-Time", response)

    def test_ready(self):
        """Test readiness with database and queue reachable."""
        response = self.client.get("/api/v1/reviews/health/ready")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ready")
        self.assertTrue(data["ready"])
        self.assertFalse(data["degraded"])
        self.assertEqual(set(data["dependencies"]), {"database", "queue"})
        self.assertIn("responseTimeMs", data["dependencies"]["database"])

    def test_queue_down_is_degraded_but_ready(self):
        self.redis.ping.side_effect = RedisConnectionError("refused")

        response = self.client.get("/api/v1/reviews/health/ready")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "degraded")

    @patch("core.services.health_service.connection")
    def test_database_down_is_unavailable(self, mock_connection):
        """Test readiness fails without the database."""
        mock_connection.ensure_connection.side_effect = OperationalError("down")

        response = self.client.get("/api/v1/reviews/health/ready")

        self.assertEqual(response.status_code, 503)
        data = response.json()
        self.assertFalse(data["ready"])
        self.assertEqual(data["status"], "not ready")
        self.assertEqual(data["dependencies"]["database"]["status"], "unhealthy")
