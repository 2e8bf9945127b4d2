"""Entity: Contact."""

from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    EmailStr,
    Field,
    StringConstraints,
    TypeAdapter,
    ValidationError,
)

from src.phonebook.entities._base import Entity

PHONE_NUMBER_PATTERN = r"^\+?[1-9]\d{1,14}$"

ContactName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)
]
PhoneNumber = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=20,
        pattern=PHONE_NUMBER_PATTERN,
    ),
]


_EMAIL_ADAPTER: TypeAdapter[str] = TypeAdapter(EmailStr)


def _check_email(value: str) -> str:
    """Validate the address but keep it exactly as submitted."""
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except ValidationError as exc:
        raise ValueError("value is not a valid email address") from exc
    if len(value) > 100:
        raise ValueError("email must be at most 100 characters")
    return value


Email = Annotated[str, AfterValidator(_check_email)]


class Contact(Entity):
    """A phonebook entry.

    The phone number is unique across all contacts; that rule is enforced by
    the contact service and backed by a unique index on the table.
    """

    name: ContactName = Field(description="Contact's display name")
    phone_number: PhoneNumber = Field(description="International phone number")
    email: Email | None = Field(default=None, description="Contact's email address")

    def __eq__(self, other: Any) -> bool:
        """Compare contacts by business attributes, ignoring timestamps."""
        if not isinstance(other, Contact):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.phone_number == other.phone_number
            and self.email == other.email
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.name, self.phone_number, self.email))
