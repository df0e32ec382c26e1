"""Tests for HealthService."""

import unittest
from unittest.mock import MagicMock, patch

from django.db.utils import OperationalError

from pydantic import ValidationError
from redis.exceptions import ConnectionError as RedisConnectionError

from core.schemas.health import LivenessResponse, ReadinessResponse
from core.services.health_service import HealthService


class TestHealthService(unittest.TestCase):
    """Readiness aggregation and probe caching."""

    def setUp(self):
        """Set up test fixtures."""
        self.service = HealthService(cache_ttl_seconds=60)
        connection_patcher = patch("core.services.health_service.connection")
        rq_patcher = patch("core.services.health_service.django_rq")
        self.mock_connection = connection_patcher.start()
        self.mock_rq = rq_patcher.start()
        self.addCleanup(connection_patcher.stop)
        self.addCleanup(rq_patcher.stop)
        self.redis = MagicMock()
        self.mock_rq.get_connection.return_value = self.redis

    def test_liveness(self):
        """Test liveness never touches dependencies."""
        self.assertEqual(self.service.get_liveness_status().status, "alive")
        self.mock_connection.ensure_connection.assert_not_called()

    def test_all_healthy(self):
        """Test both dependencies reachable."""
        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertFalse(readiness.degraded)
        self.assertEqual(readiness.status, "ready")
        self.assertEqual(set(readiness.dependencies), {"database", "queue"})
        self.assertEqual(readiness.dependencies["database"].status, "healthy")
        self.mock_rq.get_connection.assert_called_once_with("default")

    def test_database_down_is_not_ready(self):
        """Test a lost database makes the service not ready."""
        self.mock_connection.ensure_connection.side_effect = OperationalError("no route")

        readiness = self.service.get_readiness_status()

        self.assertFalse(readiness.ready)
        self.assertTrue(readiness.degraded)
        self.assertEqual(readiness.status, "not ready")
        database = readiness.dependencies["database"]
        self.assertFalse(database.healthy)
        self.assertEqual(database.status, "unhealthy")
        self.assertIn("no route", database.message)

    def test_queue_down_is_degraded(self):
        """Test a lost queue only degrades the service."""
        self.redis.ping.side_effect = RedisConnectionError("refused")

        readiness = self.service.get_readiness_status()

        self.assertTrue(readiness.ready)
        self.assertTrue(readiness.degraded)
        self.assertEqual(readiness.status, "degraded")
        self.assertIn("refused", readiness.dependencies["queue"].message)

    def test_results_are_cached(self):
        """Test probes are not repeated within the TTL."""
        self.service.get_readiness_status()
        self.service.get_readiness_status()

        self.mock_connection.ensure_connection.assert_called_once()
        self.redis.ping.assert_called_once()

    def test_clear_cache_forces_new_probe(self):
        """Test clearing the cache re-runs the probes."""
        self.service.check_database_health()
        self.service.clear_cache()
        self.service.check_database_health()

        self.assertEqual(self.mock_connection.ensure_connection.call_count, 2)

    def test_zero_ttl_disables_cache(self):
        """Test a TTL of zero probes every time."""
        service = HealthService(cache_ttl_seconds=0)

        service.check_queue_health()
        service.check_queue_health()

        self.assertEqual(self.redis.ping.call_count, 2)

    def test_response_time_is_reported(self):
        """Test probes report their duration."""
        health = self.service.check_database_health()

        self.assertIsNotNone(health.response_time_ms)
        self.assertGreaterEqual(health.response_time_ms, 0)


class TestProbeResponses(unittest.TestCase):
    """Probe body schemas."""

    def test_liveness_body(self):
        self.assertEqual(
            LivenessResponse().model_dump(by_alias=True), {"status": "alive"}
        )

    def test_readiness_rejects_unknown_status(self):
        with self.assertRaises(ValidationError):
            ReadinessResponse(
                ready=True, status="starting", degraded=False, dependencies={}
            )
