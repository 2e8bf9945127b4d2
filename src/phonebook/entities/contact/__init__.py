"""Entity package: Contact.

- Contact: Domain entity with validation
- ContactTable: Database persistence model
- ContactRepository: Data access layer
- ContactQuery: Search options understood by the repository
"""

from .entity import Contact, ContactName, Email, PhoneNumber
from .repository import ContactQuery, ContactRepository
from .table import ContactTable

__all__ = [
    "Contact",
    "ContactName",
    "ContactQuery",
    "ContactRepository",
    "ContactTable",
    "Email",
    "PhoneNumber",
]
