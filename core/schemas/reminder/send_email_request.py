"""Request schema for the manual email trigger."""

from typing import Literal, Self
from uuid import UUID

from pydantic import Field, model_validator

from core.schemas.base_schema_model import BaseSchemaModel


class SendEmailRequest(BaseSchemaModel):
    """Request schema for POST /email/send.

    Modes:
    - test: send a sample reminder to email
    - due: run a one-shot sweep over all due subscriptions
    - subscriber: remind subscriber_id about company_id now
    """

    mode: Literal["test", "due", "subscriber"] = Field(
        ..., description="Which sending flow to run"
    )
    email: str | None = Field(None, description="Recipient for test mode")
    subscriber_id: UUID | None = Field(None, description="Subscriber for subscriber mode")
    company_id: UUID | None = Field(None, description="Company for subscriber mode")

    @model_validator(mode="after")
    def check_mode_arguments(self) -> Self:
        """Require the fields the selected mode needs."""
        if self.mode == "test" and not self.email:
            raise ValueError("email is required for test mode")
        if self.mode == "subscriber" and (
            self.subscriber_id is None or self.company_id is None
        ):
            raise ValueError("subscriberId and companyId are required for subscriber mode")
        return self
