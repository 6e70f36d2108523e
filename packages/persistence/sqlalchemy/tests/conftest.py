from __future__ import annotations

from typing import TYPE_CHECKING

import pytest_asyncio

from dbiam_core.config import DbiamSettings
from dbiam_persistence_sqlalchemy import (
    SQLAlchemyUnitOfWork,
    build_repositories,
    create_engine,
    create_schema,
    create_session_factory,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from sqlalchemy.ext.asyncio import AsyncEngine


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    eng = create_engine(
        DbiamSettings(_env_file=None, database_url="sqlite+aiosqlite:///:memory:")
    )
    await create_schema(eng)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return create_session_factory(engine)


@pytest_asyncio.fixture
async def uow(session_factory) -> AsyncGenerator[SQLAlchemyUnitOfWork, None]:
    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as active:
        yield active


@pytest_asyncio.fixture
async def repos(uow):
    return build_repositories(uow)
