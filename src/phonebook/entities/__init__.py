"""Entities organised by business concept.

Each entity has its own package containing:
- entity.py: Domain model with validation
- table.py: Database persistence model
- repository.py: Data access layer built on the generic Repository
"""

from .contact import Contact, ContactQuery, ContactRepository, ContactTable
from .repository import Repository, UniqueConstraintError

__all__ = [
    "Contact",
    "ContactQuery",
    "ContactRepository",
    "ContactTable",
    "Repository",
    "UniqueConstraintError",
]
