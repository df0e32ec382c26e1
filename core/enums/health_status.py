"""Health status of the database and the job queue."""

from enum import Enum


class HealthStatus(str, Enum):
    """Status reported per dependency by the readiness probe."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"
