"""InMemoryRepository: dict-backed fake for unit tests."""

from __future__ import annotations

import builtins
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Generic, TypeVar

from dbiam_core.domain.aggregate import AggregateRoot
from dbiam_core.primitives.id_generator import IIDGenerator, UUID4Generator

if TYPE_CHECKING:
    from dbiam_core.ports.paging import Counted
    from dbiam_core.ports.query_scope import IQueryScope

T = TypeVar("T", bound=AggregateRoot)

logger = logging.getLogger("dbiam.persistence.memory")


class InMemoryRepository(Generic[T]):
    """In-memory implementation of ``IRepository[T]``.

    Stores copies of aggregates in a plain dict keyed by their ``id`` so
    that callers never share instances with the store, the same way a
    database round trip would behave.
    """

    def __init__(
        self,
        entity_cls: type[T],
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self._id_generator = id_generator or UUID4Generator()
        self._store: dict[str, T] = {}

    async def get(self, entity_id: str) -> T | None:
        entity = self._store.get(entity_id)
        return entity.model_copy(deep=True) if entity is not None else None

    async def save(self, entity: T) -> T:
        stored = entity.model_copy(deep=True)
        now = datetime.now(timezone.utc)
        if stored.id is None:
            stored.id = self._id_generator.next_id()
            stored.created_at = now
        stored.updated_at = now
        stored._version = entity.version + 1
        self._store[stored.id] = stored  # type: ignore[index]
        logger.debug("Saved %s %s", self.entity_cls.__name__, stored.id)
        return stored.model_copy(deep=True)

    async def delete(self, entity_id: str) -> bool:
        return self._store.pop(entity_id, None) is not None

    async def list_all(
        self, entity_ids: builtins.list[str] | None = None
    ) -> builtins.list[T]:
        if entity_ids is None:
            return [e.model_copy(deep=True) for e in self._store.values()]
        return [
            entity.model_copy(deep=True)
            for entity_id, entity in self._store.items()
            if entity_id in entity_ids
        ]

    async def find_by(self, scope: IQueryScope[T]) -> Counted[T]:
        return await self.execute_scope(scope)

    async def execute_scope(self, scope: IQueryScope[T]) -> Counted[T]:
        """Filter, order and page the stored rows in insertion order."""
        items, total = scope.evaluate(self._store.values())
        return [item.model_copy(deep=True) for item in items], total

    # ── Test helpers ─────────────────────────────────────────────

    def clear(self) -> None:
        self._store.clear()

    def snapshot(self) -> dict[str, T]:
        return {key: entity.model_copy(deep=True) for key, entity in self._store.items()}

    def restore(self, snapshot: dict[str, T]) -> None:
        self._store = dict(snapshot)

    def __len__(self) -> int:
        return len(self._store)
