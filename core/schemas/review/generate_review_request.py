"""Request schema for generating a review text."""

from uuid import UUID

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class GenerateReviewRequest(BaseSchemaModel):
    """Descriptors the customer selected on the review page.

    Selection bounds are checked by the service so the error can report how
    many descriptors were selected.
    """

    descriptor_ids: list[UUID] = Field(
        ..., description="Selected descriptor IDs, in any order"
    )
