"""UnitOfWork: Abstract base class for the Unit of Work pattern."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from contextlib import AbstractAsyncContextManager

logger = logging.getLogger("dbiam.uow")


class UnitOfWork(ABC):
    """
    Abstract base class for Unit of Work implementations.

    Used as an async context manager: a clean exit commits, an exception
    rolls back and propagates.

    Example:
        ```python
        async with uow_factory() as uow:
            await repo.save(organisation)
        ```

    ``savepoint()`` scopes a group of writes inside the open unit of work:
    an exception leaving the block undoes exactly those writes and
    propagates, earlier writes of the unit of work stay pending::

        async with uow.savepoint():
            await repo.delete(stale_id)
            await repo.save(replacement)
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit the transaction. Must be implemented by subclasses."""
        ...

    @abstractmethod
    async def rollback(self) -> None:
        """Rollback the transaction. Must be implemented by subclasses."""
        ...

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]: ...

    async def __aenter__(self) -> UnitOfWork:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        if exc_type is None:
            await self.commit()
        else:
            logger.debug("Rolling back after %s", exc_type.__name__)
            await self.rollback()
