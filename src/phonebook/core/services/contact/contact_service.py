"""Contact use cases: uniqueness-checked writes, lookups and search."""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from src.phonebook.core.exceptions import (
    ContactNotFoundError,
    PhoneNumberConflictError,
    StorageError,
)
from src.phonebook.core.models.contact import ContactCreate, ContactUpdate
from src.phonebook.entities._base import utc_now
from src.phonebook.entities.contact import Contact, ContactQuery, ContactRepository
from src.phonebook.entities.repository import UniqueConstraintError


class ContactService:
    """Orchestrates the contact repository for each use case.

    Phone numbers are checked for uniqueness before every write. The unique
    index on the table closes the race window between check and write; a
    violation reported by the repository surfaces as the same conflict.
    """

    def __init__(self, repository: ContactRepository):
        self._repository = repository

    def list_contacts(self) -> list[Contact]:
        try:
            return self._repository.get_all()
        except SQLAlchemyError as e:
            logger.exception("Error retrieving contacts")
            raise StorageError("An error occurred while retrieving contacts") from e

    def get_contact(self, contact_id: str) -> Contact:
        try:
            contact = self._repository.get(contact_id)
        except SQLAlchemyError as e:
            logger.exception("Error retrieving contact with ID {}", contact_id)
            raise StorageError("An error occurred while retrieving the contact") from e

        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact

    def create_contact(self, payload: ContactCreate) -> Contact:
        try:
            if self._phone_number_taken(payload.phone_number):
                logger.warning(
                    "Rejected contact creation: phone number {} already exists",
                    payload.phone_number,
                )
                raise PhoneNumberConflictError(payload.phone_number)

            contact = Contact(**payload.model_dump())
            created = self._repository.create(contact)
        except UniqueConstraintError as e:
            logger.warning(
                "Phone number {} was taken concurrently", payload.phone_number
            )
            raise PhoneNumberConflictError(payload.phone_number) from e
        except SQLAlchemyError as e:
            logger.exception("Error creating contact")
            raise StorageError("An error occurred while creating the contact") from e

        logger.info("Created contact {}", created.id)
        return created

    def update_contact(self, contact_id: str, payload: ContactUpdate) -> Contact:
        try:
            existing = self._repository.get(contact_id)
            if existing is None:
                raise ContactNotFoundError(contact_id)

            if self._phone_number_taken(payload.phone_number, exclude_id=contact_id):
                logger.warning(
                    "Rejected update of contact {}: phone number {} belongs to another contact",
                    contact_id,
                    payload.phone_number,
                )
                raise PhoneNumberConflictError(
                    payload.phone_number, for_another_contact=True
                )

            changed = existing.model_copy(
                update={**payload.model_dump(), "updated_at": utc_now()}
            )
            updated = self._repository.update(changed)
        except UniqueConstraintError as e:
            logger.warning(
                "Phone number {} was taken concurrently", payload.phone_number
            )
            raise PhoneNumberConflictError(
                payload.phone_number, for_another_contact=True
            ) from e
        except SQLAlchemyError as e:
            logger.exception("Error updating contact with ID {}", contact_id)
            raise StorageError("An error occurred while updating the contact") from e

        if updated is None:
            # removed between the lookup and the write
            raise ContactNotFoundError(contact_id)

        logger.info("Updated contact {}", contact_id)
        return updated

    def delete_contact(self, contact_id: str) -> None:
        try:
            deleted = self._repository.delete(contact_id)
        except SQLAlchemyError as e:
            logger.exception("Error deleting contact with ID {}", contact_id)
            raise StorageError("An error occurred while deleting the contact") from e

        if not deleted:
            logger.warning("Delete requested for unknown contact {}", contact_id)
            raise ContactNotFoundError(contact_id)

        logger.info("Deleted contact {}", contact_id)

    def search_contacts(self, search_term: str | None = None) -> list[Contact]:
        """Contacts whose name or phone number contains ``search_term``.

        An empty or missing term returns every contact.
        """
        try:
            return self._repository.search(ContactQuery.for_term(search_term))
        except SQLAlchemyError as e:
            logger.exception("Error searching contacts with term {!r}", search_term)
            raise StorageError("An error occurred while searching contacts") from e

    def _phone_number_taken(
        self, phone_number: str, exclude_id: str | None = None
    ) -> bool:
        query = ContactQuery(phone_number=phone_number, exclude_id=exclude_id)
        return bool(self._repository.search(query))
