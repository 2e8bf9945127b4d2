"""Error types raised by the contact service and rendered by the API layer."""


class PhoneBookError(Exception):
    """Base error carrying the HTTP status and the client-facing messages."""

    status_code: int = 500

    def __init__(self, message: str, detailed_message: str | None = None):
        super().__init__(message)
        self.message = message
        self.detailed_message = detailed_message or message


class ContactNotFoundError(PhoneBookError):
    status_code = 404

    def __init__(self, contact_id: str):
        super().__init__(
            f"Contact with ID {contact_id} not found",
            f"No contact is stored under the identifier '{contact_id}'.",
        )
        self.contact_id = contact_id


class PhoneNumberConflictError(PhoneBookError):
    """The phone number is already held by another contact."""

    status_code = 400

    def __init__(self, phone_number: str, *, for_another_contact: bool = False):
        message = (
            "Phone number already exists for another contact"
            if for_another_contact
            else "Phone number already exists"
        )
        super().__init__(
            message,
            f"The phone number '{phone_number}' is already assigned to a contact.",
        )
        self.phone_number = phone_number


class StorageError(PhoneBookError):
    """Unexpected persistence failure; details stay in the server logs."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message, "An unexpected error occurred. Check the server logs.")
