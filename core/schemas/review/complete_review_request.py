"""Request schema for marking a review as completed."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CompleteReviewRequest(BaseSchemaModel):
    """Subscriber who reported the review as posted."""

    subscriber_id: UUID = Field(..., description="The sid from the review link")
