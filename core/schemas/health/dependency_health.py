"""Dependency health schema."""

from pydantic import Field

from core.enums.health_status import HealthStatus
from core.schemas.base_schema_model import BaseSchemaModel


class DependencyHealth(BaseSchemaModel):
    """Health of one backing dependency (database or job queue)."""

    healthy: bool = Field(..., description="Whether the dependency is reachable")
    status: HealthStatus = Field(..., description="Health status of the dependency")
    message: str = Field(..., description="Human-readable health message")
    response_time_ms: float | None = Field(
        None, description="Probe duration in milliseconds"
    )
