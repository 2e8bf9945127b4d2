"""Contact data-access layer."""

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field
from sqlalchemy import func
from sqlmodel import col, or_

from src.phonebook.entities.contact.entity import Contact
from src.phonebook.entities.contact.table import ContactTable
from src.phonebook.entities.repository import Repository


class ContactQuery(BaseModel):
    """Search options for contacts.

    ``name_contains`` and ``phone_contains`` are case-sensitive substring
    matches OR-ed together. ``phone_number`` and ``exclude_id`` narrow the
    result further.
    Empty strings count as unset.
    """

    name_contains: str | None = Field(default=None)
    phone_contains: str | None = Field(default=None)
    phone_number: str | None = Field(default=None)
    exclude_id: str | None = Field(default=None)

    @classmethod
    def for_term(cls, term: str | None) -> "ContactQuery":
        """Match ``term`` against either the name or the phone number."""
        return cls(name_contains=term, phone_contains=term)


class ContactRepository(Repository[Contact, ContactTable, ContactQuery]):
    """Data-access layer for contacts."""

    entity_type = Contact
    table_type = ContactTable

    def _where(self, query: ContactQuery) -> Sequence[Any]:
        clauses: list[Any] = []

        text_matches = []
        if query.name_contains:
            text_matches.append(
                func.instr(col(ContactTable.name), query.name_contains) > 0
            )
        if query.phone_contains:
            text_matches.append(
                func.instr(col(ContactTable.phone_number), query.phone_contains) > 0
            )
        if text_matches:
            clauses.append(or_(*text_matches))

        if query.phone_number:
            clauses.append(col(ContactTable.phone_number) == query.phone_number)
        if query.exclude_id:
            clauses.append(col(ContactTable.id) != query.exclude_id)

        return clauses
