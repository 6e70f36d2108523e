"""Aggregate Root base class."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator


class AggregateRoot(BaseModel):
    """Base class for all Aggregate Roots.

    An aggregate that was never saved has ``id``, ``created_at`` and
    ``updated_at`` set to ``None``; the repository assigns them on the first
    ``save``.  ``_version`` is managed by the persistence layer.

    Usage::

        class Organisation(AggregateRoot):
            name: str | None = None

        draft = Organisation(name="Carl-Orff-Schule")
        assert not draft.is_persisted
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    _version: int = PrivateAttr(default=0)

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    @property
    def version(self) -> int:
        """Read-only version, managed by the persistence layer."""
        return self._version

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # stores without time zone support hand back naive UTC values
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
