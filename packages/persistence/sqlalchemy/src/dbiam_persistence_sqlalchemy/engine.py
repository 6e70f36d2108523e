"""Engine and session factories built from :class:`DbiamSettings`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .core.models import Base

if TYPE_CHECKING:
    from dbiam_core.config import DbiamSettings

logger = logging.getLogger("dbiam.persistence.sqlalchemy")


def _enable_sqlite_savepoints(engine: AsyncEngine) -> None:
    # the sqlite driver opens transactions lazily on its own, which breaks
    # SAVEPOINT; let SQLAlchemy emit BEGIN instead
    @event.listens_for(engine.sync_engine, "connect")
    def _no_driver_begin(dbapi_connection: Any, _record: Any) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine.sync_engine, "begin")
    def _emit_begin(conn: Any) -> None:
        conn.exec_driver_sql("BEGIN")


def create_engine(settings: DbiamSettings) -> AsyncEngine:
    logger.info("Creating engine for %s", settings.database_url.split("@")[-1])
    engine = create_async_engine(settings.database_url, echo=settings.database_echo)
    if engine.dialect.name == "sqlite":
        _enable_sqlite_savepoints(engine)
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


async def create_schema(engine: AsyncEngine) -> None:
    """Create every table of :class:`Base` that does not exist yet."""
    # registers the tables on Base.metadata
    from . import tables  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
