"""Counted and Paged: result shapes of scoped queries.

``Counted[T]`` is the raw ``(items, total)`` pair a store returns for a
query scope: ``items`` are filtered, sorted and paged, ``total`` is the
number of rows matching the filters regardless of the paging window.

``Paged[T]`` is what services hand to the outer layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

Counted = tuple[list[T], int]


@dataclass(frozen=True)
class Paged(Generic[T]):
    """One page of results plus the paging window that produced it."""

    items: list[T]
    total: int
    offset: int
    limit: int

    @property
    def items_count(self) -> int:
        return len(self.items)

    @classmethod
    def from_counted(
        cls,
        counted: Counted[T],
        offset: int | None = None,
        limit: int | None = None,
    ) -> Paged[T]:
        """An unset offset reads as ``0``, an unset limit as ``total``."""
        items, total = counted
        return cls(
            items=items,
            total=total,
            offset=offset if offset is not None else 0,
            limit=limit if limit is not None else total,
        )
