"""Schemas for the core app."""

from core.schemas.health import (
    DependencyHealth,
    LivenessResponse,
    ReadinessResponse,
)
from core.schemas.reminder import (
    SendEmailRequest,
    SendEmailResponse,
    SubscriberResult,
    SweepResult,
)

__all__ = [
    "DependencyHealth",
    "LivenessResponse",
    "ReadinessResponse",
    "SendEmailRequest",
    "SendEmailResponse",
    "SubscriberResult",
    "SweepResult",
]
