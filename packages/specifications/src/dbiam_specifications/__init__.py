"""dbiam-specifications: query scopes and asynchronous domain rules."""

from __future__ import annotations

from .base import (
    AndSpecification,
    BaseSpecification,
    NotSpecification,
    OrSpecification,
    PredicateSpecification,
)
from .evaluator import ScopeEvaluator
from .exceptions import FieldNotFoundError, InvalidPagingError, SpecificationError
from .operators import ScopeOperator, ScopeOrder
from .pipeline import SpecificationPipeline, validate
from .scope import FilterGroup, FilterPredicate, ScopeBase, SortKey

__all__ = [
    # Rules
    "AndSpecification",
    "BaseSpecification",
    "NotSpecification",
    "OrSpecification",
    "PredicateSpecification",
    # Pipeline
    "SpecificationPipeline",
    "validate",
    # Scopes
    "FilterGroup",
    "FilterPredicate",
    "ScopeBase",
    "ScopeEvaluator",
    "ScopeOperator",
    "ScopeOrder",
    "SortKey",
    # Exceptions
    "FieldNotFoundError",
    "InvalidPagingError",
    "SpecificationError",
]
