"""Validation system: ValidationResult, field rules, PydanticValidator."""

from __future__ import annotations

from .pydantic import PydanticValidator
from .result import ValidationResult
from .rules import (
    Constraint,
    FieldRule,
    is_date_constraint,
    resolve_path,
    validate_fields,
)

__all__ = [
    "Constraint",
    "FieldRule",
    "PydanticValidator",
    "ValidationResult",
    "is_date_constraint",
    "resolve_path",
    "validate_fields",
]
