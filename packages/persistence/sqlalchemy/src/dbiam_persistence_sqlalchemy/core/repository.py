from __future__ import annotations

import builtins
import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError

from dbiam_core.domain.aggregate import AggregateRoot
from dbiam_core.primitives.id_generator import IIDGenerator, UUID4Generator

from ..exceptions import RepositoryError
from ..scope import compile_scope
from .model_mapper import ModelMapper

if TYPE_CHECKING:
    from dbiam_core.ports.paging import Counted
    from dbiam_core.ports.query_scope import IQueryScope

    from .uow import SQLAlchemyUnitOfWork

T = TypeVar("T", bound=AggregateRoot)

logger = logging.getLogger("dbiam.persistence.sqlalchemy")


class SQLAlchemyRepository(Generic[T]):
    """
    Implementation of ``IRepository[T]`` using SQLAlchemy.

    Separates the domain entity type (``entity_cls``, a Pydantic
    ``AggregateRoot``) from the persistence model (``db_model_cls``, a
    SQLAlchemy ``DeclarativeBase`` subclass).  Mapping between the two is
    handled by a :class:`ModelMapper`, exposed via ``to_model`` /
    ``from_model``.

    The repository works inside the session of the unit of work it is
    bound to; committing is the unit of work's job::

        async with SQLAlchemyUnitOfWork(session_factory=factory) as uow:
            repo = SQLAlchemyRepository(Organisation, OrganisationModel, uow)
            saved = await repo.save(Organisation(name="Carl-Orff-Schule"))

    Driver failures are raised as :class:`RepositoryError`.
    """

    def __init__(
        self,
        entity_cls: type[T],
        db_model_cls: type[Any],
        uow: SQLAlchemyUnitOfWork,
        *,
        id_generator: IIDGenerator | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.db_model_cls = db_model_cls
        self._uow = uow
        self._id_generator = id_generator or UUID4Generator()
        self._mapper: ModelMapper[T] = ModelMapper(entity_cls, db_model_cls)

    @property
    def _entity_name(self) -> str:
        return self.entity_cls.__name__

    def to_model(self, entity: T) -> Any:
        """Convert domain entity → SQLAlchemy model."""
        return self._mapper.to_model(entity)

    def from_model(self, model: Any) -> T:
        """Convert SQLAlchemy model → domain entity."""
        return self._mapper.from_model(model)

    # -- CRUD ---------------------------------------------------------------

    async def get(self, entity_id: str) -> T | None:
        try:
            model = await self._uow.session.get(self.db_model_cls, entity_id)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to load {self._entity_name} {entity_id}: {e}"
            ) from e
        if model is None:
            return None
        return self.from_model(model)

    async def save(self, entity: T) -> T:
        """Insert or update *entity* and return the stored state."""
        now = datetime.now(timezone.utc)
        values = self._mapper.to_values(entity)
        values["updated_at"] = now
        values["version"] = entity.version + 1

        session = self._uow.session
        try:
            existing = (
                await session.get(self.db_model_cls, entity.id)
                if entity.id is not None
                else None
            )
            if existing is None:
                values["id"] = entity.id or self._id_generator.next_id()
                values["created_at"] = entity.created_at or now
                model = self.db_model_cls(**values)
                session.add(model)
            else:
                values.pop("created_at", None)
                for key, value in values.items():
                    setattr(existing, key, value)
                model = existing
            await session.flush()
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to save {self._entity_name} {entity.id}: {e}"
            ) from e

        logger.debug("Saved %s %s (version %s)", self._entity_name, model.id, model.version)
        return self.from_model(model)

    async def delete(self, entity_id: str) -> bool:
        try:
            result = await self._uow.session.execute(
                delete(self.db_model_cls).where(self.db_model_cls.id == entity_id)
            )
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to delete {self._entity_name} {entity_id}: {e}"
            ) from e
        return bool(result.rowcount)

    async def list_all(
        self, entity_ids: builtins.list[str] | None = None
    ) -> builtins.list[T]:
        query = select(self.db_model_cls)
        if entity_ids is not None:
            query = query.where(self.db_model_cls.id.in_(entity_ids))
        try:
            result = await self._uow.session.execute(query)
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to list {self._entity_name}: {e}") from e
        return self._mapper.from_models(list(result.scalars().all()))

    # -- scoped queries -----------------------------------------------------

    async def find_by(self, scope: IQueryScope[T]) -> Counted[T]:
        return await self.execute_scope(scope)

    async def execute_scope(self, scope: IQueryScope[T]) -> Counted[T]:
        """Run the scope's items and count statements in one session."""
        items_stmt, count_stmt = compile_scope(self.db_model_cls, scope)
        session = self._uow.session
        try:
            total = (await session.execute(count_stmt)).scalar_one()
            result = await session.execute(items_stmt)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Failed to query {self._entity_name} with {scope!r}: {e}"
            ) from e
        return self._mapper.from_models(list(result.scalars().all())), int(total)
