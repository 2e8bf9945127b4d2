"""Contact database table model."""

from sqlmodel import Field

from src.phonebook.entities._base import EntityTable


class ContactTable(EntityTable, table=True):
    """Database persistence model for contacts.

    ``phone_number`` carries a unique index so that concurrent writers racing
    past the service's pre-check are still rejected by the database.
    """

    __tablename__ = "contacts"

    name: str = Field(max_length=100, nullable=False)
    phone_number: str = Field(max_length=20, nullable=False, unique=True, index=True)
    email: str | None = Field(default=None, max_length=100)
