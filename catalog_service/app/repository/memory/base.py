"""Generic in-memory store backing every catalog repository"""

import asyncio
from typing import Callable, Iterable, List, Optional

from ...core.exceptions import RepositoryOperationError
from ...models.base import utc_now
from ...utils.logging import setup_catalog_logging as setup_logging
from ..base import BaseRepository, EntityT

logger = setup_logging("catalog_service.storage")


class InMemoryRepository(BaseRepository[EntityT]):
    """Ordered list of records plus the id counter for one entity type.

    Every read and write of the list happens under ``self._lock`` so
    concurrent requests can neither corrupt the list nor hand out an id
    twice. Callers only ever receive copies of the stored records.
    """

    entity_name = "Entity"

    def __init__(self, records: Optional[Iterable[EntityT]] = None) -> None:
        self._lock = asyncio.Lock()
        self._records: List[EntityT] = [self._copy(r) for r in records or ()]
        self._next_id = max((r.id for r in self._records), default=0) + 1

        logger.info(
            f"{self.entity_name} store initialized",
            extra={
                "entity": self.entity_name,
                "seeded_records": len(self._records),
                "next_id": self._next_id,
            },
        )

    @staticmethod
    def _copy(entity: EntityT) -> EntityT:
        """Detached copy with transient fields reset to their defaults"""
        record = entity.model_copy(deep=True)
        for name in type(entity).TRANSIENT_FIELDS:
            field = type(entity).model_fields[name]
            setattr(record, name, field.get_default(call_default_factory=True))
        return record

    def _find(self, entity_id: int) -> Optional[EntityT]:
        # Linear scan; the catalog is small enough that an index is not worth it
        for record in self._records:
            if record.id == entity_id:
                return record
        return None

    def _touch(self, record: EntityT) -> None:
        """Hook for stores that stamp records on update"""

    async def _select(self, predicate: Callable[[EntityT], bool]) -> List[EntityT]:
        async with self._lock:
            return [self._copy(r) for r in self._records if predicate(r)]

    async def get_all(self) -> List[EntityT]:
        async with self._lock:
            return [self._copy(r) for r in self._records]

    async def get_by_id(self, entity_id: int) -> Optional[EntityT]:
        async with self._lock:
            record = self._find(entity_id)
            return self._copy(record) if record is not None else None

    async def add(self, entity: EntityT) -> EntityT:
        async with self._lock:
            record = self._copy(entity)
            record.id = self._next_id
            self._next_id += 1
            record.created_at = utc_now()
            self._records.append(record)

            logger.debug(
                f"{self.entity_name} added",
                extra={"entity": self.entity_name, "entity_id": record.id},
            )
            return self._copy(record)

    async def update(self, entity: EntityT) -> EntityT:
        async with self._lock:
            record = self._find(entity.id)
            if record is None:
                raise RepositoryOperationError(
                    f"{self.entity_name} with ID {entity.id} not found"
                )

            # id and created_at never change after creation
            for name in type(record).MUTABLE_FIELDS:
                setattr(record, name, getattr(entity, name))
            self._touch(record)

            logger.debug(
                f"{self.entity_name} updated",
                extra={"entity": self.entity_name, "entity_id": record.id},
            )
            return self._copy(record)

    async def delete(self, entity_id: int) -> bool:
        async with self._lock:
            record = self._find(entity_id)
            if record is None:
                return False

            self._records.remove(record)
            logger.debug(
                f"{self.entity_name} deleted",
                extra={"entity": self.entity_name, "entity_id": entity_id},
            )
            return True

    async def exists(self, entity_id: int) -> bool:
        async with self._lock:
            return self._find(entity_id) is not None
