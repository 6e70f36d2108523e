"""
Scope and specification exception hierarchy with fuzzy-match suggestions.

These are programmer errors: they are raised while a scope is being built
and never travel inside a ``Result``.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all scope and specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class FieldNotFoundError(SpecificationError):
    """
    Invalid field name with helpful suggestions.

    Example error message::

        Invalid field 'knenung' on 'Organisation'.
        Did you mean one of these?
          • kennung

        Available fields: administriert_von, created_at, id, kennung, ...
    """

    def __init__(
        self,
        invalid_field: str,
        model_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.model_name = model_name
        self.available_fields = available_fields

        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=5, cutoff=cutoff
        )

        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"Invalid field '{self.invalid_field}' on '{self.model_name}'."]
        if self.suggestions:
            lines.append("Did you mean one of these?")
            for s in self.suggestions:
                lines.append(f"  • {s}")

        sorted_fields = sorted(self.available_fields)
        preview = ", ".join(sorted_fields[:15])
        if len(sorted_fields) > 15:
            preview += ", ..."
        lines.append(f"Available fields: {preview}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "model": self.model_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class InvalidPagingError(SpecificationError, ValueError):
    """Offset or limit is negative."""

    def __init__(self, name: str, value: int) -> None:
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a non-negative integer, got {value!r}")

    def to_dict(self) -> dict[str, Any]:
        return {"error": "INVALID_PAGING", "parameter": self.name, "value": self.value}
