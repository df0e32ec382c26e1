"""Bodies returned by /health/live and /health/ready."""

from typing import Literal

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.health.dependency_health import DependencyHealth


class LivenessResponse(BaseSchemaModel):
    """The process answers requests; dependencies are not consulted."""

    status: Literal["alive"] = "alive"


class ReadinessResponse(BaseSchemaModel):
    """Whether reminders can be read and sent right now.

    ready is False only without a database. A missing job queue leaves the
    service ready but degraded, since the cron trigger runs sweeps in-process.
    """

    ready: bool = Field(..., description="Service can read and send reminders")
    status: Literal["ready", "degraded", "not ready"] = Field(
        ..., description="Overall status"
    )
    degraded: bool = Field(..., description="Whether a dependency is unhealthy")
    dependencies: dict[str, DependencyHealth] = Field(
        ..., description="Status of the database and the job queue"
    )
