"""Response schemas for subscriber endpoints."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class SubscriptionInfo(BaseSchemaModel):
    """One company subscription of a subscriber."""

    company_id: UUID = Field(..., description="Company")
    next_notification_at: datetime | None = Field(
        None, description="Next scheduled reminder"
    )
    review_completed_at: datetime | None = Field(
        None, description="When the review was completed"
    )


class SubscriberResponse(BaseSchemaModel):
    """Subscriber with its subscriptions."""

    id: UUID = Field(..., description="Subscriber ID")
    email: str = Field(..., description="Normalised email")
    is_active: bool = Field(..., description="Whether reminders are sent")
    subscriptions: list[SubscriptionInfo] = Field(
        default_factory=list, description="Company subscriptions"
    )
