"""
In-memory evaluation of query scopes.

Used by in-memory stores and tests; mirrors what the SQL compiler does:
AND between groups, the group's own operator inside it, stable multi-key
ordering, and a total that ignores the paging window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from dbiam_core.validation.rules import resolve_path

from .operators import ScopeOperator, ScopeOrder

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from dbiam_core.ports.paging import Counted
    from dbiam_core.ports.query_scope import IQueryScope

    from .scope import FilterGroup, FilterPredicate, SortKey

T = TypeVar("T")


class ScopeEvaluator:
    """Applies a scope's filters, ordering and paging to Python objects."""

    def evaluate(self, scope: IQueryScope[T], candidates: Iterable[T]) -> Counted[T]:
        matching = [c for c in candidates if self.matches(scope.filters, c)]
        total = len(matching)
        ordered = self.order(scope.sort, matching)
        return self.page(ordered, scope.offset, scope.limit), total

    # -- filtering --------------------------------------------------------

    def matches(self, groups: Sequence[FilterGroup], candidate: Any) -> bool:
        return all(self._matches_group(group, candidate) for group in groups)

    def _matches_group(self, group: FilterGroup, candidate: Any) -> bool:
        results = (self._matches_predicate(p, candidate) for p in group.predicates)
        if group.operator is ScopeOperator.OR:
            return any(results)
        return all(results)

    @staticmethod
    def _matches_predicate(predicate: FilterPredicate, candidate: Any) -> bool:
        return bool(resolve_path(candidate, predicate.field) == predicate.value)

    # -- ordering ---------------------------------------------------------

    @staticmethod
    def order(keys: Sequence[SortKey], items: list[T]) -> list[T]:
        """Stable multi-key sort; the first key has the highest priority."""
        ordered = list(items)
        # Sorting by the lowest-priority key first keeps ties stable.
        for key in reversed(keys):

            def sort_value(item: Any, field: str = key.field) -> tuple[bool, Any]:
                value = resolve_path(item, field)
                return value is None, value

            ordered.sort(key=sort_value, reverse=key.order is ScopeOrder.DESC)
        return ordered

    # -- paging -----------------------------------------------------------

    @staticmethod
    def page(items: list[T], offset: int | None, limit: int | None) -> list[T]:
        start = offset or 0
        end = start + limit if limit is not None else None
        return items[start:end]
