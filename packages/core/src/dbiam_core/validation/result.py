"""ValidationResult: structured validation errors."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ValidationResult:
    """Collects field-level validation errors.

    Keys are dotted field paths (``"geburt.datum"``), values are the names
    of the constraints that failed, in the order they were checked.

    Usage::

        result = ValidationResult.success()
        result = ValidationResult.failure({"name": ["required"]})
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    # ── Factory methods ──────────────────────────────────────────

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors=errors)

    # ── Merging ──────────────────────────────────────────────────

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Merge another result into this one, combining all errors."""
        merged = {name: list(messages) for name, messages in self.errors.items()}
        for field_name, messages in other.errors.items():
            merged.setdefault(field_name, []).extend(messages)
        return ValidationResult(errors=merged)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a single error for *field_name*."""
        self.errors.setdefault(field_name, []).append(message)

    def first_error(self) -> tuple[str, str]:
        """Return ``(field_path, constraint)`` of the first recorded error.

        Raises ``ValueError`` on a valid result.
        """
        for field_name, messages in self.errors.items():
            if messages:
                return field_name, messages[0]
        raise ValueError("ValidationResult holds no errors")

    def __bool__(self) -> bool:
        return self.is_valid
