"""Thread-safe in-memory storage shared by the entity repositories."""

import itertools
import logging
import threading
from typing import Generic, TypeVar

from pydantic import BaseModel

from errors import NotFoundError

logger = logging.getLogger(__name__)


EntityT = TypeVar("EntityT", bound=BaseModel)


class InMemoryStore(Generic[EntityT]):
    """
    Keyed record store guarded by a single lock.

    IDs come from a monotonic counter starting at 1, so deleted IDs are never
    handed out again. Records are copied on the way in and on the way out.
    """

    entity_name: str = "record"

    def __init__(self) -> None:
        self._records: dict[int, EntityT] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, entity: EntityT) -> EntityT:
        """
        Store a new record under the next ID.

        Args:
            entity: Record to store; its ``id`` is ignored.

        Returns:
            A copy of the stored record carrying the assigned ID.
        """
        with self._lock:
            record = self._prepare_create(entity.model_copy(update={"id": next(self._ids)}))
            self._records[record.id] = record  # type: ignore[attr-defined]
        logger.debug("%s stored", self.entity_name, extra={f"{self.entity_name}_id": record.id})  # type: ignore[attr-defined]
        return record.model_copy()

    def list(self) -> list[EntityT]:
        with self._lock:
            return [self._records[key].model_copy() for key in sorted(self._records)]

    def get(self, id: int) -> EntityT:
        with self._lock:
            record = self._records.get(id)
        if record is None:
            raise NotFoundError(self.entity_name, id)
        return record.model_copy()

    def update(self, entity: EntityT) -> EntityT:
        """
        Replace an existing record.

        Raises:
            NotFoundError: when no record has the entity's ID.
        """
        entity_id: int = entity.id  # type: ignore[attr-defined]
        with self._lock:
            current = self._records.get(entity_id)
            if current is None:
                raise NotFoundError(self.entity_name, entity_id)
            record = self._prepare_update(current, entity.model_copy())
            self._records[entity_id] = record
        return record.model_copy()

    def delete(self, id: int) -> bool:
        with self._lock:
            if self._records.pop(id, None) is None:
                raise NotFoundError(self.entity_name, id)
        logger.debug("%s deleted", self.entity_name, extra={f"{self.entity_name}_id": id})
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    # hooks for repositories that own extra fields
    def _prepare_create(self, record: EntityT) -> EntityT:
        return record

    def _prepare_update(self, current: EntityT, record: EntityT) -> EntityT:
        return record
