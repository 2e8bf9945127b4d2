"""Response shapes of the contacts API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True
    )


class ContactResponse(CamelModel):
    id: str
    name: str
    phone_number: str
    email: str | None = None
    created_at: datetime
    updated_at: datetime | None = None


class ErrorResponse(CamelModel):
    """Uniform error body returned for every failed request."""

    status: int = Field(description="HTTP status code")
    message: str = Field(description="Short description of the failure")
    detailed_message: str = Field(description="Additional detail for the client")
