"""Paging window defaults shared by the listing services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dbiam_core.config import DbiamSettings


def effective_limit(limit: int | None, settings: DbiamSettings | None) -> int | None:
    """Apply the configured default and cap to a requested page size.

    Without settings the requested limit is returned unchanged.
    """
    if settings is None:
        return limit
    if limit is None:
        limit = settings.default_page_limit
    if limit is None:
        return None
    return min(limit, settings.max_page_limit)
