"""Response schema for single reminder sends."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class SendEmailResponse(BaseSchemaModel):
    """Response for test and subscriber mode sends."""

    success: bool = Field(..., description="Whether the transport accepted it")
    message: str = Field(..., description="Human-readable summary")
    email_id: str | None = Field(None, description="Transport message id")
