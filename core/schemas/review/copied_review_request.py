"""Request schema for recording a copied review."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class CopiedReviewRequest(BaseSchemaModel):
    """Review text the customer copied to the clipboard."""

    review_text: str = Field(..., min_length=1, description="The copied text")
