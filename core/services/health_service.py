"""Health check service with short-lived result caching."""

import time
from collections.abc import Callable

from django.db import connection
from django.db.utils import OperationalError

import django_rq
import structlog
from redis.exceptions import RedisError

from core.enums import HealthStatus
from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)

logger = structlog.get_logger(__name__)


class HealthService:
    """Service for performing health checks with caching."""

    def __init__(self, cache_ttl_seconds: float = 5.0) -> None:
        """Initialize the health service.

        Args:
            cache_ttl_seconds: Time to live for cached health check results
        """
        self.cache_ttl_seconds = cache_ttl_seconds
        self._cache: dict[str, tuple[float, DependencyHealth]] = {}

    def get_liveness_status(self) -> LivenessResponse:
        """Get liveness status (always returns alive)."""
        return LivenessResponse()

    def get_readiness_status(self) -> ReadinessResponse:
        """Get readiness status with database and queue health checks.

        The database is required: without it no subscription can be read, so
        the service reports not ready. A broken queue only degrades the
        service, since sweeps can still be triggered over HTTP.

        Returns:
            ReadinessResponse with overall status and dependency health
        """
        db_health = self.check_database_health()
        queue_health = self.check_queue_health()

        if not db_health.healthy:
            ready, degraded, status = False, True, "not ready"
        elif not queue_health.healthy:
            ready, degraded, status = True, True, "degraded"
        else:
            ready, degraded, status = True, False, "ready"

        return ReadinessResponse(
            ready=ready,
            status=status,
            degraded=degraded,
            dependencies={"database": db_health, "queue": queue_health},
        )

    def check_database_health(self) -> DependencyHealth:
        """Check database connectivity.

        Uses Django's ensure_connection() to validate the socket without
        running a query.
        """
        return self._cached("database", self._probe_database)

    def check_queue_health(self) -> DependencyHealth:
        """Check the Redis connection behind the default rq queue."""
        return self._cached("queue", self._probe_queue)

    def clear_cache(self) -> None:
        self._cache.clear()

    def _cached(
        self, name: str, probe: Callable[[], DependencyHealth]
    ) -> DependencyHealth:
        current_time = time.time()
        cached = self._cache.get(name)
        if cached is not None and current_time - cached[0] < self.cache_ttl_seconds:
            return cached[1]

        health = probe()
        if not health.healthy:
            logger.warning(
                "dependency_unhealthy",
                dependency=name,
                message=health.message,
            )
        self._cache[name] = (current_time, health)
        return health

    def _probe_database(self) -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            connection.ensure_connection()
        except OperationalError as e:
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Database connection failed: {e!s}",
                response_time_ms=_elapsed_ms(start_time),
            )
        return DependencyHealth(
            healthy=True,
            status=HealthStatus.HEALTHY,
            message="Database connection successful",
            response_time_ms=_elapsed_ms(start_time),
        )

    def _probe_queue(self) -> DependencyHealth:
        start_time = time.perf_counter()
        try:
            django_rq.get_connection("default").ping()
        except (RedisError, OSError) as e:
            return DependencyHealth(
                healthy=False,
                status=HealthStatus.UNHEALTHY,
                message=f"Queue connection failed: {e!s}",
                response_time_ms=_elapsed_ms(start_time),
            )
        return DependencyHealth(
            healthy=True,
            status=HealthStatus.HEALTHY,
            message="Queue connection successful",
            response_time_ms=_elapsed_ms(start_time),
        )


def _elapsed_ms(start_time: float) -> float:
    return (time.perf_counter() - start_time) * 1000


health_service = HealthService()
