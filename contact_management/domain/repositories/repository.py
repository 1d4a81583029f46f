"""
Generic Repository Interface
============================

CRUD contract shared by every entity repository.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

EntityType = TypeVar("EntityType")


class Repository(ABC, Generic[EntityType]):
    """
    Abstract repository for basic persistence operations.

    Ids <= 0 mean "not persisted yet", ids > 0 must point at an
    existing row.
    """

    @abstractmethod
    def get_all(self) -> List[EntityType]:
        """
        Get every row, ordered by primary key.

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    def get(self, entity_id: int) -> EntityType:
        """
        Get an entity by its primary identifier.

        Args:
            entity_id: Primary identifier

        Returns:
            Entity

        Raises:
            NotFoundError: If no row matches
        """
        pass

    @abstractmethod
    def save(self, entity: EntityType) -> int:
        """
        Insert (id <= 0) or update (id > 0) an entity.

        Args:
            entity: Entity to persist

        Returns:
            Id of the inserted or updated row

        Raises:
            NotFoundError: If an update targets a missing row
        """
        pass

    @abstractmethod
    def delete(self, entity_id: int) -> None:
        """
        Delete an entity by its primary identifier.

        Args:
            entity_id: Primary identifier

        Raises:
            NotFoundError: If no row matches
        """
        pass
