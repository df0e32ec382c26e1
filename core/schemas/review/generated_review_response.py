"""Response schemas for review page actions."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class GeneratedReviewResponse(BaseSchemaModel):
    """Composed review text and where to post it."""

    company_slug: str = Field(..., description="Company the review is for")
    review_text: str = Field(..., description="Composed review text")
    descriptors: list[str] = Field(..., description="Phrases used, in order")
    google_review_url: str = Field(..., description="Google write-review link")


class CopiedReviewResponse(BaseSchemaModel):
    """Stored copied review."""

    id: UUID = Field(..., description="GeneratedReview ID")
    created_at: datetime = Field(..., description="When the copy was recorded")


class CompleteReviewResponse(BaseSchemaModel):
    """Outcome of marking a review completed."""

    subscriber_id: UUID = Field(..., description="Subscriber")
    company_id: UUID = Field(..., description="Company")
    completed: bool = Field(
        ..., description="False if the review had already been completed"
    )
    subscriber_active: bool = Field(
        ..., description="False once every subscription is completed"
    )
