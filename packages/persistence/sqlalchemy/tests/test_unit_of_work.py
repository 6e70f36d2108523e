import pytest

from dbiam_domain.organisation import Organisation
from dbiam_persistence_sqlalchemy import (
    SessionManagementError,
    SQLAlchemyUnitOfWork,
    UnitOfWorkError,
    build_repositories,
)


@pytest.mark.asyncio
async def test_clean_exit_commits(session_factory) -> None:
    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        saved = await build_repositories(uow).organisation.save(Organisation(name="A"))

    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        assert await build_repositories(uow).organisation.get(saved.id) is not None


@pytest.mark.asyncio
async def test_error_rolls_back(session_factory) -> None:
    saved_id = None
    with pytest.raises(RuntimeError):
        async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
            saved = await build_repositories(uow).organisation.save(Organisation(name="A"))
            saved_id = saved.id
            raise RuntimeError("abort")

    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        assert await build_repositories(uow).organisation.get(saved_id) is None


@pytest.mark.asyncio
async def test_caller_managed_session(session_factory) -> None:
    async with session_factory() as session:
        async with SQLAlchemyUnitOfWork(session=session) as uow:
            await build_repositories(uow).organisation.save(Organisation(name="A"))
        assert session.is_active


def test_needs_exactly_one_session_source(session_factory) -> None:
    with pytest.raises(SessionManagementError):
        SQLAlchemyUnitOfWork()
    with pytest.raises(SessionManagementError):
        SQLAlchemyUnitOfWork(session=session_factory(), session_factory=session_factory)


def test_session_before_enter_raises(session_factory) -> None:
    with pytest.raises(UnitOfWorkError):
        SQLAlchemyUnitOfWork(session_factory=session_factory).session


@pytest.mark.asyncio
async def test_savepoint_undoes_only_its_own_writes(session_factory) -> None:
    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        repo = build_repositories(uow).organisation
        kept = await repo.save(Organisation(name="A"))
        discarded_id = None
        with pytest.raises(RuntimeError):
            async with uow.savepoint():
                discarded_id = (await repo.save(Organisation(name="B"))).id
                raise RuntimeError("abort")

        assert await repo.get(kept.id) is not None
        assert await repo.get(discarded_id) is None

    async with SQLAlchemyUnitOfWork(session_factory=session_factory) as uow:
        names = [o.name for o in await build_repositories(uow).organisation.list_all()]
        assert names == ["A"]


@pytest.mark.asyncio
async def test_savepoint_before_enter_raises(session_factory) -> None:
    with pytest.raises(UnitOfWorkError):
        async with SQLAlchemyUnitOfWork(session_factory=session_factory).savepoint():
            pass
