"""InMemoryUnitOfWork: tracks commit/rollback calls for unit tests."""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING, Any

from ...ports.unit_of_work import UnitOfWork

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from .repository import InMemoryRepository

logger = logging.getLogger("dbiam.persistence.memory")


class InMemoryUnitOfWork(UnitOfWork):
    """Records commit/rollback calls for assertions.

    Repositories passed to the constructor take part in savepoints: their
    rows are snapshotted on entry and restored when the block raises.
    """

    def __init__(self, *repositories: InMemoryRepository[Any]) -> None:
        self.repositories = repositories
        self.commit_count: int = 0
        self.rollback_count: int = 0
        self.savepoint_rollbacks: int = 0

    async def commit(self) -> None:
        self.commit_count += 1

    async def rollback(self) -> None:
        self.rollback_count += 1

    @contextlib.asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        snapshots = [repo.snapshot() for repo in self.repositories]
        try:
            yield
        except BaseException:
            for repo, snapshot in zip(self.repositories, snapshots):
                repo.restore(snapshot)
            self.savepoint_rollbacks += 1
            logger.debug("Savepoint rolled back %d repositories", len(snapshots))
            raise
