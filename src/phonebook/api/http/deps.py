"""FastAPI dependency implementations."""

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.phonebook.api.http.app_data import ApplicationDependencies
from src.phonebook.core.services import ContactService, DbSessionService
from src.phonebook.entities.contact import ContactRepository


def get_database_service(request: Request) -> DbSessionService:
    """Get the database service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_db_session(
    database_service: DbSessionService = Depends(get_database_service),
) -> Iterator[Session]:
    """Yield a session that lives for the duration of one request."""
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_contact_repository(
    db: Session = Depends(get_db_session),
) -> ContactRepository:
    return ContactRepository(db)


def get_contact_service(
    repository: ContactRepository = Depends(get_contact_repository),
) -> ContactService:
    return ContactService(repository)
