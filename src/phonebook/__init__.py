"""PhoneBook API.

A FastAPI service for managing phonebook contacts backed by SQLModel/SQLite.
"""

__version__ = "0.1.0"
