"""Generic repository contract shared by every catalog entity.

Concrete storage (in-memory today) lives under ``repository.memory``; the
services only ever depend on the abstract classes in this package.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from ..models.base import CatalogBaseModel

EntityT = TypeVar("EntityT", bound=CatalogBaseModel)


class BaseRepository(ABC, Generic[EntityT]):
    """CRUD contract for one entity type"""

    @abstractmethod
    async def get_all(self) -> List[EntityT]:
        """Return every entity in the store's current order."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[EntityT]:
        """Return the entity with ``entity_id``, or None if there is none."""

    @abstractmethod
    async def add(self, entity: EntityT) -> EntityT:
        """Assign id and ``created_at``, store the entity and return it."""

    @abstractmethod
    async def update(self, entity: EntityT) -> EntityT:
        """Overwrite the mutable fields of the stored entity with the same id.

        Raises:
            RepositoryOperationError: no entity with that id is stored
        """

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Remove the entity; False if it was not stored."""

    @abstractmethod
    async def exists(self, entity_id: int) -> bool:
        """Check whether an entity with ``entity_id`` is stored."""
