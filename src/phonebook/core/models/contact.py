"""Contact write payloads."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.phonebook.entities.contact import ContactName, Email, PhoneNumber


class ContactWrite(BaseModel):
    """Fields a client may set on a contact.

    Accepts both ``phoneNumber`` and ``phone_number``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: ContactName = Field(description="Contact's display name", examples=["John Doe"])
    phone_number: PhoneNumber = Field(
        description="International phone number, optionally prefixed with '+'",
        examples=["+11234567890"],
    )
    email: Email | None = Field(
        default=None, description="Contact's email address", examples=["john@example.com"]
    )


class ContactCreate(ContactWrite):
    """Payload for creating a contact."""


class ContactUpdate(ContactWrite):
    """Payload for replacing a contact's fields."""
