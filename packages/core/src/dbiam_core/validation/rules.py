"""Declarative field rules and the single validator that runs them.

Rules are plain data: a dotted path, a constraint and an optional argument.
One entity type declares one tuple of rules::

    PERSON_FIELD_RULES = (
        FieldRule("familienname", Constraint.REQUIRED),
        FieldRule("familienname", Constraint.MAX_LENGTH, 64),
        FieldRule("geburtsdatum", Constraint.IS_DATE),
    )
    result = validate_fields(person, PERSON_FIELD_RULES)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from .result import ValidationResult

if TYPE_CHECKING:
    from collections.abc import Iterable


class Constraint(str, Enum):
    REQUIRED = "required"
    NOT_EMPTY = "not_empty"
    MAX_LENGTH = "max_length"
    PATTERN = "pattern"
    IS_DATE = "is_date"
    NO_SURROUNDING_WHITESPACE = "no_surrounding_whitespace"


# pydantic error types that mean "not a valid date" as well
_PYDANTIC_DATE_ERRORS = frozenset(
    {
        "date_type",
        "date_parsing",
        "date_from_datetime_parsing",
        "date_from_datetime_inexact",
        "datetime_type",
        "datetime_parsing",
        "datetime_from_date_parsing",
    }
)


def is_date_constraint(constraint: str) -> bool:
    """True for :attr:`Constraint.IS_DATE` and pydantic's date error types."""
    return constraint == Constraint.IS_DATE.value or constraint in _PYDANTIC_DATE_ERRORS


@dataclass(frozen=True)
class FieldRule:
    path: str
    constraint: Constraint
    argument: Any = None


def resolve_path(obj: Any, path: str) -> Any:
    """Resolve a dot-separated path over attributes and mapping keys."""
    for part in path.split("."):
        if obj is None:
            return None
        obj = obj.get(part) if isinstance(obj, dict) else getattr(obj, part, None)
    return obj


def _is_date(value: Any) -> bool:
    if isinstance(value, (date, datetime)):
        return True
    if not isinstance(value, str):
        return False
    for parse in (date.fromisoformat, datetime.fromisoformat):
        try:
            parse(value)
        except ValueError:
            continue
        return True
    return False


def _check(rule: FieldRule, value: Any) -> bool:
    if rule.constraint is Constraint.REQUIRED:
        return value is not None
    if value is None:
        # every other constraint only applies to present values
        return True
    if rule.constraint is Constraint.NOT_EMPTY:
        return len(value) > 0
    if rule.constraint is Constraint.MAX_LENGTH:
        return len(value) <= int(rule.argument)
    if rule.constraint is Constraint.PATTERN:
        return re.fullmatch(rule.argument, str(value)) is not None
    if rule.constraint is Constraint.IS_DATE:
        return _is_date(value)
    if rule.constraint is Constraint.NO_SURROUNDING_WHITESPACE:
        return str(value) == str(value).strip()
    raise ValueError(f"Unsupported constraint: {rule.constraint!r}")


def validate_fields(candidate: Any, rules: Iterable[FieldRule]) -> ValidationResult:
    """Check every rule against *candidate* and collect all failures."""
    result = ValidationResult.success()
    for rule in rules:
        if not _check(rule, resolve_path(candidate, rule.path)):
            result.add_error(rule.path, rule.constraint.value)
    return result
