"""Domain primitives: aggregates and value objects."""

from __future__ import annotations

from .aggregate import AggregateRoot
from .specification import ISpecification, candidate_id
from .value_object import ValueObject

__all__: list[str] = [
    "AggregateRoot",
    "ISpecification",
    "ValueObject",
    "candidate_id",
]
