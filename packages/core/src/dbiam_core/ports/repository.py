"""IRepository: generic repository protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from ..domain.aggregate import AggregateRoot

if TYPE_CHECKING:
    from .paging import Counted
    from .query_scope import IQueryScope

T = TypeVar("T", bound=AggregateRoot)


@runtime_checkable
class IScopeStore(Protocol[T]):
    """Anything a query scope can be executed against."""

    async def execute_scope(self, scope: IQueryScope[T]) -> Counted[T]: ...


@runtime_checkable
class IRepository(IScopeStore[T], Protocol[T]):
    """
    Generic Repository interface for state-stored aggregates.

    ``find_by`` runs a query scope and returns ``(items, total)``::

        scope = (
            OrganisationScope()
            .find_by({"typ": OrganisationsTyp.SCHULE}, ScopeOperator.AND)
            .sort_by("kennung", ScopeOrder.ASC)
            .paged(offset=0, limit=25)
        )
        items, total = await repo.find_by(scope)
    """

    async def get(self, entity_id: str) -> T | None: ...

    async def find_by(self, scope: IQueryScope[T]) -> Counted[T]: ...

    async def save(self, entity: T) -> T: ...

    async def delete(self, entity_id: str) -> bool: ...

    async def list_all(self, entity_ids: list[str] | None = None) -> list[T]: ...
