"""
Query scopes: filter groups, ordering and paging for one storage read.

A scope is a mutable builder owned by the operation that creates it::

    scope = (
        OrganisationScope()
        .find_by({"kennung": kennung, "name": name}, ScopeOperator.AND)
        .sort_by("kennung", ScopeOrder.ASC)
        .paged(offset, limit)
    )
    items, total = await scope.execute(organisation_repo)

Rules:

- every ``find_by`` call adds one filter group; groups are ANDed,
- predicates inside a group use the operator passed to that call,
- ``None`` values are dropped before the group is built; a group left
  empty adds no constraint,
- ``total`` counts the filtered rows regardless of the paging window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from typing_extensions import Self

from .evaluator import ScopeEvaluator
from .exceptions import FieldNotFoundError, InvalidPagingError
from .operators import ScopeOperator, ScopeOrder

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from dbiam_core.ports.paging import Counted
    from dbiam_core.ports.repository import IScopeStore

T = TypeVar("T")

logger = logging.getLogger("dbiam.specifications.scope")


@dataclass(frozen=True)
class FilterPredicate:
    """A single ``field == value`` condition."""

    field: str
    value: Any


@dataclass(frozen=True)
class FilterGroup:
    operator: ScopeOperator
    predicates: tuple[FilterPredicate, ...]


@dataclass(frozen=True)
class SortKey:
    field: str
    order: ScopeOrder


class ScopeBase(Generic[T]):
    """
    Base class of all query scopes.

    Subclasses pin ``entity_cls`` to a pydantic model; its fields are the
    only names ``find_by`` and ``sort_by`` accept.
    """

    entity_cls: ClassVar[type[Any]]

    def __init__(self) -> None:
        self._filters: list[FilterGroup] = []
        self._sort: list[SortKey] = []
        self._offset: int | None = None
        self._limit: int | None = None

    # -- read-only view (IQueryScope) ------------------------------------

    @property
    def filters(self) -> tuple[FilterGroup, ...]:
        return tuple(self._filters)

    @property
    def sort(self) -> tuple[SortKey, ...]:
        return tuple(self._sort)

    @property
    def offset(self) -> int | None:
        return self._offset

    @property
    def limit(self) -> int | None:
        return self._limit

    @classmethod
    def available_fields(cls) -> frozenset[str]:
        return frozenset(cls.entity_cls.model_fields)

    # -- building ---------------------------------------------------------

    def find_by(self, criteria: Mapping[str, Any], operator: ScopeOperator) -> Self:
        """Add one filter group built from *criteria*.

        The combinator is required: ``ScopeOperator.AND`` when every
        given field must match, ``ScopeOperator.OR`` when any may.
        """
        for field_name in criteria:
            self._check_field(field_name)
        predicates = tuple(
            FilterPredicate(field_name, value)
            for field_name, value in criteria.items()
            if value is not None
        )
        if predicates:
            self._filters.append(FilterGroup(ScopeOperator(operator), predicates))
        return self

    def sort_by(self, field_name: str, order: ScopeOrder) -> Self:
        """Append a sort key; earlier keys take priority."""
        self._check_field(field_name)
        self._sort.append(SortKey(field_name, ScopeOrder(order)))
        return self

    def paged(self, offset: int | None = None, limit: int | None = None) -> Self:
        """Set the paging window; ``None`` leaves that side unbounded."""
        if offset is not None and offset < 0:
            raise InvalidPagingError("offset", offset)
        if limit is not None and limit < 0:
            raise InvalidPagingError("limit", limit)
        self._offset = offset
        self._limit = limit
        return self

    def _check_field(self, field_name: str) -> None:
        fields = self.available_fields()
        if field_name not in fields:
            raise FieldNotFoundError(
                field_name, self.entity_cls.__name__, sorted(fields)
            )

    # -- running ----------------------------------------------------------

    def evaluate(self, candidates: Iterable[T]) -> Counted[T]:
        """Apply this scope to in-memory *candidates*."""
        return ScopeEvaluator().evaluate(self, candidates)

    async def execute(self, store: IScopeStore[Any]) -> Counted[T]:
        """Run the scope against *store* in a single round trip."""
        logger.debug(
            "Executing %s (groups=%d, sort=%d, offset=%s, limit=%s)",
            type(self).__name__,
            len(self._filters),
            len(self._sort),
            self._offset,
            self._limit,
        )
        return await store.execute_scope(self)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(filters={self._filters!r}, sort={self._sort!r}, "
            f"offset={self._offset!r}, limit={self._limit!r})"
        )
