"""Schemas describing the outcome of a reminder sweep."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.enums import ReminderMode
from core.schemas.base_schema_model import BaseSchemaModel


class SubscriberResult(BaseSchemaModel):
    """Outcome of one subscription within a sweep."""

    subscription_id: UUID = Field(..., description="Processed subscription")
    subscriber_id: UUID = Field(..., description="Recipient subscriber")
    company_id: UUID = Field(..., description="Company the reminder was about")
    email: str = Field(..., description="Recipient address")
    success: bool = Field(..., description="Whether the transport accepted it")
    skipped: bool = Field(
        False, description="Subscription stopped being due before sending"
    )
    delivery_id: str | None = Field(None, description="Transport message id")
    error: str | None = Field(None, description="Failure reason")
    next_notification_at: datetime | None = Field(
        None, description="Schedule written after a successful send"
    )
    stale: bool = Field(
        False,
        description="Sent, but the schedule update lost a race with another writer",
    )


class SweepResult(BaseSchemaModel):
    """Aggregate outcome of a reminder sweep.

    Individual send failures do not fail the sweep; they are counted in
    failed_count and described in results.
    """

    success: bool = Field(True, description="Sweep ran to completion")
    mode: ReminderMode = Field(..., description="recurring or one_shot")
    sent_count: int = Field(0, ge=0, description="Reminders accepted by transport")
    failed_count: int = Field(0, ge=0, description="Reminders that failed")
    skipped_count: int = Field(
        0, ge=0, description="Subscriptions no longer due when reached"
    )
    timestamp: datetime = Field(..., description="Reference instant of the sweep")
    results: list[SubscriberResult] = Field(
        default_factory=list, description="Per-subscription outcomes"
    )
