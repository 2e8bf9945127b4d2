"""Input models accepted by the contact service."""

from .contact import ContactCreate, ContactUpdate, ContactWrite

__all__ = ["ContactCreate", "ContactUpdate", "ContactWrite"]
