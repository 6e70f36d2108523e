"""Declarative base and column mixins shared by every table."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy models in this package."""


class EntityMixin:
    """
    Columns every aggregate table carries.

    ``version`` mirrors the aggregate's private ``_version`` and is bumped by
    :class:`~dbiam_persistence_sqlalchemy.core.repository.SQLAlchemyRepository`
    on every save.  Timestamps are assigned by the repository as well, so
    in-memory and SQL stores agree on them.
    """

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    version: Mapped[int] = mapped_column(Integer, default=0)
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )
