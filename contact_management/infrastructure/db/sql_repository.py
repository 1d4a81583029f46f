"""
SQL Repository Base
===================

Shared CRUD implementation for the SQLAlchemy repositories.
Subclasses describe their table and how rows map to domain models.
"""
import logging
from typing import Any, Generic, List, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from contact_management.domain.exceptions import NotFoundError
from contact_management.infrastructure.db.database import Database

EntityType = TypeVar("EntityType")

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


def fits_id(entity_id: int) -> bool:
    return -MAX_ID - 1 <= entity_id <= MAX_ID


class SqlRepository(Generic[EntityType]):
    """
    Base class with get_all / get / save / delete over one table.

    Class attributes:
        record_type: ORM class of the table
        id_attribute: Primary key attribute, shared by record and entity
        entity_name: Name used in NotFoundError messages
    """

    record_type: Type[Any]
    id_attribute: str
    entity_name: str

    def __init__(self, database: Database, logger: logging.Logger):
        """
        Initialize repository with a database.

        Args:
            database: Database providing transactional sessions
            logger: Logger for this repository
        """
        self._database = database
        self._logger = logger

    def _to_entity(self, record: Any) -> EntityType:
        """Convert an ORM record to a domain model."""
        raise NotImplementedError

    def _apply(self, entity: EntityType, record: Any) -> None:
        """Copy writable fields from a domain model onto a record."""
        raise NotImplementedError

    def _check_references(self, session: Session, entity: EntityType) -> None:
        """Verify foreign keys before writing. No-op by default."""

    def _primary_key(self):
        return getattr(self.record_type, self.id_attribute)

    def _require(self, session: Session, record_type: Type[Any], entity_name: str, entity_id: int, lock: bool = False) -> Any:
        if not fits_id(entity_id):
            raise NotFoundError(entity_name, entity_id)
        record = session.get(record_type, entity_id, with_for_update=lock)
        if record is None:
            raise NotFoundError(entity_name, entity_id)
        return record

    def get_all(self) -> List[EntityType]:
        """Get every row, ordered by primary key."""
        with self._database.session() as session:
            records = session.scalars(
                select(self.record_type).order_by(self._primary_key())
            ).all()
            return [self._to_entity(record) for record in records]

    def get(self, entity_id: int) -> EntityType:
        """Get a row by id or raise NotFoundError."""
        with self._database.session() as session:
            record = self._require(session, self.record_type, self.entity_name, entity_id)
            return self._to_entity(record)

    def save(self, entity: EntityType) -> int:
        """
        Insert (id <= 0) or update (id > 0) in a single transaction.

        The assigned id is written back onto the entity and returned.
        """
        is_update = not entity.is_new()
        with self._database.session() as session:
            self._check_references(session, entity)

            if is_update:
                record = self._require(
                    session, self.record_type, self.entity_name, getattr(entity, self.id_attribute), lock=True
                )
            else:
                record = self.record_type()
                session.add(record)

            self._apply(entity, record)
            session.flush()
            saved_id = getattr(record, self.id_attribute)

        setattr(entity, self.id_attribute, saved_id)
        action = "Updated" if is_update else "Created"
        self._logger.info(f"{action} {self.entity_name} #{saved_id}")
        return saved_id

    def delete(self, entity_id: int) -> None:
        """Delete a row by id; dependent rows follow the table's cascade rules."""
        with self._database.session() as session:
            record = self._require(session, self.record_type, self.entity_name, entity_id, lock=True)
            session.delete(record)
        self._logger.info(f"Deleted {self.entity_name} #{entity_id}")
