"""Shared pydantic base for request and response bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base for every API schema of the review service.

    Bodies use camelCase on the wire ("companyIds", "sentCount") and
    snake_case in Python; either spelling is accepted on input. Strings are
    stripped, unknown keys ignored, and models can be built from ORM rows.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        extra="ignore",
        str_strip_whitespace=True,
    )
