"""Request schema for subscribing to review reminders."""

from uuid import UUID

from pydantic import Field, field_validator

from core.constants.review import MAX_NOTIFICATION_INTERVAL_DAYS
from core.enums import PreferredLanguage, TimeSlot
from core.schemas.base_schema_model import BaseSchemaModel
from core.services.email_service import EmailService


class SubscribeRequest(BaseSchemaModel):
    """Signup wizard submission.

    Interval and time slot are optional; the scheduler defaults apply when
    they are left out.
    """

    email: str = Field(..., max_length=255, description="Subscriber email")
    name: str | None = Field(None, max_length=255, description="Display name")
    company_ids: list[UUID] = Field(
        ..., min_length=1, description="Companies to receive reminders for"
    )
    notification_interval_days: float | None = Field(
        None,
        ge=0,
        le=MAX_NOTIFICATION_INTERVAL_DAYS,
        description="Days between reminders; 0 and fractions for testing",
    )
    preferred_time_slot: TimeSlot | None = Field(
        None, description="Part of the day reminders are sent in"
    )
    preferred_language: PreferredLanguage = Field(
        PreferredLanguage.DE, description="Language of reminder emails"
    )

    @field_validator("email")
    @classmethod
    def validate_email(cls, value: str) -> str:
        """Normalise and check the address."""
        value = value.strip().lower()
        if not EmailService.is_valid_email(value):
            raise ValueError("invalid email address")
        return value
