from dataclasses import dataclass

from src.phonebook.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
