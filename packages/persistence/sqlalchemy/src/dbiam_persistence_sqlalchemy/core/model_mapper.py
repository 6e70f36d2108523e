"""
ModelMapper: bidirectional mapper between Pydantic ``AggregateRoot``
entities and SQLAlchemy ``DeclarativeBase`` models.

Features
--------
- **Safe column extraction**: only reads columns defined in ``__table__``
  and skips attributes that are not loaded.
- **Private-attribute mapping**: ``_version`` maps to the ``version``
  column in both directions.
- **Enum coercion**: ``Enum`` members are stored as their ``.value``;
  lists of enums become JSON lists of values.
- **Field exclusion**: fields listed in ``exclude_fields`` are never
  mapped.
"""

from __future__ import annotations

import enum
import logging
from typing import Any, Generic, TypeVar

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import NoInspectionAvailable

from ..exceptions import MappingError

logger = logging.getLogger("dbiam.persistence.mapper")

T_Entity = TypeVar("T_Entity")


def coerce_value(value: Any) -> Any:
    """Convert a domain value to its column representation."""
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, (list, set, frozenset, tuple)):
        return [coerce_value(item) for item in value]
    if isinstance(value, dict):
        return {k: coerce_value(v) for k, v in value.items()}
    if hasattr(value, "model_dump"):
        return value.model_dump(mode="json")
    return value


class ModelMapper(Generic[T_Entity]):
    """
    Bidirectional mapper between a Pydantic domain entity and a SQLAlchemy
    persistence model.

    Parameters
    ----------
    entity_cls:
        The Pydantic ``AggregateRoot`` subclass.
    db_model_cls:
        The SQLAlchemy ``DeclarativeBase`` subclass that represents the
        database table.
    exclude_fields:
        Set of field names to exclude from mapping in both directions.
    """

    def __init__(
        self,
        entity_cls: type[T_Entity],
        db_model_cls: type[Any],
        *,
        exclude_fields: set[str] | None = None,
    ) -> None:
        self.entity_cls = entity_cls
        self.db_model_cls = db_model_cls
        self._exclude_fields: frozenset[str] = frozenset(exclude_fields or ())
        self._columns: frozenset[str] = frozenset(db_model_cls.__table__.columns.keys())
        self._private_attr_map = self._initialize_private_attr_map(entity_cls)

    def _initialize_private_attr_map(self, entity_cls: type[Any]) -> dict[str, str]:
        private_attr_map: dict[str, str] = {}
        for attr_name in getattr(entity_cls, "__private_attributes__", {}):
            if attr_name.startswith("_") and not attr_name.startswith("__"):
                public_name = attr_name.lstrip("_")
                if public_name in self._columns:
                    private_attr_map[attr_name] = public_name
        return private_attr_map

    @property
    def columns(self) -> frozenset[str]:
        return self._columns

    # ------------------------------------------------------------------
    # Domain → DB
    # ------------------------------------------------------------------

    def to_values(self, entity: Any) -> dict[str, Any]:
        """Column values for *entity*, ready for a model constructor."""
        data = dict(entity.model_dump(mode="python"))
        for attr_name, public_name in self._private_attr_map.items():
            data[public_name] = getattr(entity, attr_name)
        return {
            key: coerce_value(value)
            for key, value in data.items()
            if key in self._columns and key not in self._exclude_fields
        }

    def to_model(self, entity: T_Entity) -> Any:
        return self.db_model_cls(**self.to_values(entity))

    # ------------------------------------------------------------------
    # DB → Domain
    # ------------------------------------------------------------------

    def from_model(self, model: Any) -> T_Entity:
        """
        Convert a *DB model* to a *domain entity*.

        Builds the entity via ``model_validate()`` from a plain dict, never
        ``from_attributes``, so no lazy load is triggered.
        """
        unloaded = self._get_unloaded(model)
        data = {
            column: getattr(model, column)
            for column in self._columns
            if column not in unloaded and column not in self._exclude_fields
        }
        try:
            entity = self.entity_cls.model_validate(data)  # type: ignore[attr-defined]
        except Exception as e:  # noqa: BLE001
            # Catch all deserialization errors (validation, type errors, etc.)
            raise MappingError(
                f"Failed to map DB model {type(model).__name__}"
                f"(id={getattr(model, 'id', None)}) to domain entity "
                f"{self.entity_cls.__name__}: {e}"
            ) from e

        for attr_name, public_name in self._private_attr_map.items():
            if data.get(public_name) is not None:
                setattr(entity, attr_name, data[public_name])
        return entity  # type: ignore[no-any-return]

    def from_models(self, models: list[Any]) -> list[T_Entity]:
        return [self.from_model(model) for model in models]

    @staticmethod
    def _get_unloaded(model: Any) -> frozenset[str]:
        """Return the set of unloaded attribute names for a mapped instance."""
        try:
            return frozenset(sa_inspect(model).unloaded)
        except NoInspectionAvailable:
            logger.debug("%s is not a mapped instance", type(model).__name__)
            return frozenset()
