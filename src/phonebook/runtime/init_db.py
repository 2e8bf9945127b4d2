"""Database initialization script."""

from loguru import logger

from src.phonebook.core.services.database.db_session import DbSessionService
from src.phonebook.runtime.context import get_config


def init_db() -> None:
    """Create all database tables."""
    logger.info("Initializing database at {}", get_config().database.url)
    DbSessionService().create_all()


if __name__ == "__main__":
    init_db()
