"""IQueryScope: what a store needs to know about a query scope."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .paging import Counted

T = TypeVar("T")


@runtime_checkable
class IQueryScope(Protocol[T]):
    """
    Read-only view of a query scope.

    Stores consume it in two ways: SQL-backed stores read ``filters``,
    ``sort``, ``offset`` and ``limit`` and compile them; in-memory stores
    hand their rows to ``evaluate``.
    """

    @property
    def entity_cls(self) -> type[T]: ...

    @property
    def filters(self) -> Sequence[Any]: ...

    @property
    def sort(self) -> Sequence[Any]: ...

    @property
    def offset(self) -> int | None: ...

    @property
    def limit(self) -> int | None: ...

    def evaluate(self, candidates: Iterable[T]) -> Counted[T]:
        """Apply filters, ordering and paging to *candidates* in memory."""
        ...
