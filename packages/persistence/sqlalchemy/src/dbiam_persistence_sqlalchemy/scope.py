"""
Compile a query scope into SQLAlchemy statements.

Filter groups become ``and_``/``or_`` clauses which are ANDed together;
sort keys become ``asc``/``desc`` with an explicit NULL placement
(``ASC`` NULLS LAST, ``DESC`` NULLS FIRST) so every dialect orders missing
values the same way; the total is a ``count()`` over the filtered select
without ordering or paging.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from sqlalchemy import ColumnElement, Select, and_, asc, desc, func, or_, select

from dbiam_specifications.operators import ScopeOperator, ScopeOrder

from .core.model_mapper import coerce_value
from .exceptions import RepositoryError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from dbiam_core.ports.query_scope import IQueryScope


def _column(model: type[Any], field_name: str) -> Any:
    col = getattr(model, field_name, None)
    if col is None:
        raise RepositoryError(
            f"Field {field_name!r} has no column on {model.__name__}"
        )
    return col


def build_where(model: type[Any], groups: Sequence[Any]) -> ColumnElement[bool] | None:
    """Build the WHERE clause for *groups*; ``None`` when unfiltered."""
    clauses: list[ColumnElement[bool]] = []
    for group in groups:
        conditions = [
            _column(model, predicate.field) == coerce_value(predicate.value)
            for predicate in group.predicates
        ]
        if not conditions:
            continue
        if group.operator is ScopeOperator.OR:
            clauses.append(or_(*conditions))
        else:
            clauses.append(and_(*conditions))
    if not clauses:
        return None
    return and_(*clauses)


def apply_order(stmt: Select[Any], model: type[Any], keys: Sequence[Any]) -> Select[Any]:
    """Apply sort keys, then the primary key as the final tie-breaker."""
    order_clauses: list[Any] = []
    for key in keys:
        col = _column(model, key.field)
        if key.order is ScopeOrder.DESC:
            order_clauses.append(desc(col).nulls_first())
        else:
            order_clauses.append(asc(col).nulls_last())
    order_clauses.append(asc(model.id))
    return stmt.order_by(*order_clauses)


def apply_paging(
    stmt: Select[Any], offset: int | None, limit: int | None
) -> Select[Any]:
    if offset:
        stmt = stmt.offset(offset)
    if limit is not None:
        stmt = stmt.limit(limit)
    return stmt


def compile_scope(
    model: type[Any], scope: IQueryScope[Any]
) -> tuple[Select[Any], Select[Any]]:
    """
    Return ``(items_stmt, count_stmt)`` for *scope*.

    ``items_stmt`` is filtered, ordered and paged; ``count_stmt`` selects the
    number of filtered rows.
    """
    where = build_where(model, scope.filters)

    items_stmt = select(model)
    count_stmt = select(func.count()).select_from(model)
    if where is not None:
        items_stmt = items_stmt.where(where)
        count_stmt = count_stmt.where(where)

    items_stmt = apply_order(items_stmt, model, scope.sort)
    items_stmt = apply_paging(items_stmt, scope.offset, scope.limit)
    return items_stmt, count_stmt
