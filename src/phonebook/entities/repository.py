"""Generic data-access layer shared by all entity repositories."""

from collections.abc import Sequence
from typing import Any, ClassVar, Generic, TypeVar

from loguru import logger
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from src.phonebook.entities._base import Entity, EntityTable

EntityT = TypeVar("EntityT", bound=Entity)
TableT = TypeVar("TableT", bound=EntityTable)
QueryT = TypeVar("QueryT", bound=BaseModel)


class UniqueConstraintError(Exception):
    """Raised when a write is rejected by a unique index."""

    def __init__(self, table: str, detail: str):
        super().__init__(f"Unique constraint violated on {table}: {detail}")
        self.table = table
        self.detail = detail


class Repository(Generic[EntityT, TableT, QueryT]):
    """CRUD and search over one entity type.

    Subclasses set ``entity_type`` and ``table_type`` and translate their
    query model into SQL clauses in ``_where``. Every mutating call commits
    immediately.
    """

    entity_type: ClassVar[type[Entity]]
    table_type: ClassVar[type[EntityTable]]

    def __init__(self, session: Session) -> None:
        self._session = session

    def _to_entity(self, row: TableT) -> EntityT:
        return self.entity_type.model_validate(row, from_attributes=True)  # type: ignore[return-value]

    def _where(self, query: QueryT) -> Sequence[Any]:
        raise NotImplementedError

    def _commit(self) -> None:
        try:
            self._session.commit()
        except IntegrityError as exc:
            self._session.rollback()
            if "UNIQUE" not in str(exc.orig).upper():
                raise
            logger.warning(
                "Unique constraint rejected write to {}", self.table_type.__tablename__
            )
            raise UniqueConstraintError(
                str(self.table_type.__tablename__), str(exc.orig)
            ) from exc
        except Exception:
            self._session.rollback()
            raise

    def get_all(self) -> list[EntityT]:
        rows = self._session.exec(select(self.table_type)).all()
        return [self._to_entity(row) for row in rows]

    def get(self, entity_id: str) -> EntityT | None:
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)

    def create(self, entity: EntityT) -> EntityT:
        row = self.table_type.model_validate(entity, from_attributes=True)
        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def update(self, entity: EntityT) -> EntityT | None:
        """Replace the stored row with ``entity``; ``None`` when the id is unknown."""
        row = self._session.get(self.table_type, entity.id)
        if row is None:
            return None

        for key, value in entity.model_dump(exclude={"id"}).items():
            setattr(row, key, value)

        self._session.add(row)
        self._commit()
        self._session.refresh(row)
        return self._to_entity(row)

    def delete(self, entity_id: str) -> bool:
        """Remove the row with ``entity_id``; ``False`` when the id is unknown."""
        row = self._session.get(self.table_type, entity_id)
        if row is None:
            return False

        self._session.delete(row)
        self._commit()
        return True

    def search(self, query: QueryT) -> list[EntityT]:
        statement = select(self.table_type)
        clauses = self._where(query)
        if clauses:
            statement = statement.where(*clauses)
        rows = self._session.exec(statement).all()
        return [self._to_entity(row) for row in rows]
