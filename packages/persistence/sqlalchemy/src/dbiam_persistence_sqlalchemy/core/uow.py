"""
Unit of work over one SQLAlchemy ``AsyncSession``.

The session either comes from the caller, who also closes it, or from a
session factory, in which case the unit of work opens it on entry and
closes it on exit::

    async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
        repos = build_repositories(uow)
        service = PersonenkontextService(..., uow=uow)
        result = await service.update_personenkontexte(...)

Leaving the block commits, an exception rolls back.  Writes that must be
undone on their own use :meth:`SQLAlchemyUnitOfWork.savepoint`, which maps
to ``SAVEPOINT`` / ``ROLLBACK TO SAVEPOINT`` via ``begin_nested()``.
"""

from __future__ import annotations

import contextlib
import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from dbiam_core.ports.unit_of_work import UnitOfWork

from ..exceptions import SessionManagementError, UnitOfWorkError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable
    from types import TracebackType

    from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger("dbiam.persistence.uow")


class SQLAlchemyUnitOfWork(UnitOfWork):
    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: Callable[[], AsyncSession] | None = None,
    ) -> None:
        if (session is None) == (session_factory is None):
            raise SessionManagementError(
                "Pass exactly one of 'session' or 'session_factory'"
            )
        self._session = session
        self._session_factory = session_factory

    @property
    def owns_session(self) -> bool:
        return self._session_factory is not None

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise UnitOfWorkError("No open session; enter the unit of work first")
        return self._session

    async def __aenter__(self) -> SQLAlchemyUnitOfWork:
        if self._session_factory is not None:
            self._session = self._session_factory()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            await super().__aexit__(exc_type, exc_val, exc_tb)
        finally:
            if self.owns_session:
                await self._close()

    async def _close(self) -> None:
        session, self._session = self._session, None
        if session is None:
            return
        try:
            await session.close()
        except SQLAlchemyError as e:
            raise SessionManagementError(f"Closing the session failed: {e}") from e

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.warning("Commit failed, rolling back: %s", e)
            with contextlib.suppress(SQLAlchemyError):
                await self.session.rollback()
            raise UnitOfWorkError(f"Commit failed: {e}") from e

    async def rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            raise UnitOfWorkError(f"Rollback failed: {e}") from e

    @contextlib.asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Undo the block's writes if it raises; the exception propagates."""
        try:
            async with self.session.begin_nested():
                yield
        except SQLAlchemyError as e:
            raise UnitOfWorkError(f"Savepoint failed: {e}") from e
        except BaseException:
            logger.debug("Rolled back to savepoint")
            raise
