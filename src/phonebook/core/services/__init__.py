"""Core services exports."""

# Contact Services
from .contact import ContactService

# Database Service
from .database.db_session import DbSessionService

__all__ = [
    # Contact Services
    "ContactService",
    # Database Service
    "DbSessionService",
]
