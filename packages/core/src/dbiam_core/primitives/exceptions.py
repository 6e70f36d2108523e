"""Domain and infrastructure exceptions for dbiam-core.

Domain errors form a closed taxonomy (:class:`DomainErrorKind`).  They are
usually *returned* inside a :class:`~dbiam_core.primitives.result.Result`
rather than raised; the boundary layer decides how to present them.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..validation.result import ValidationResult


class DbiamError(Exception):
    """Root exception for the entire dbiam toolkit."""


class DomainErrorKind(str, Enum):
    """Closed set of domain failure kinds."""

    NOT_FOUND = "NOT_FOUND"
    ALREADY_EXISTS = "ALREADY_EXISTS"
    COULD_NOT_BE_CREATED = "COULD_NOT_BE_CREATED"
    COULD_NOT_BE_UPDATED = "COULD_NOT_BE_UPDATED"
    COULD_NOT_BE_DELETED = "COULD_NOT_BE_DELETED"
    SPECIFICATION_VIOLATED = "SPECIFICATION_VIOLATED"
    MISMATCHED_REVISION = "MISMATCHED_REVISION"
    INVALID_ATTRIBUTE = "INVALID_ATTRIBUTE"


class DomainError(DbiamError):
    """Base class for all domain-related errors.

    Every subclass pins :attr:`kind`; the boundary mapper only ever looks at
    the kind and the carried context, never at the concrete class.
    """

    kind: DomainErrorKind

    def __init__(
        self,
        message: str,
        entity_type: str,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.details: dict[str, Any] = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "details": self.details,
        }


class EntityNotFoundError(DomainError):
    """Raised when a specific entity cannot be found by ID."""

    kind = DomainErrorKind.NOT_FOUND

    def __init__(self, entity_type: str, entity_id: str | None = None) -> None:
        super().__init__(
            f"{entity_type} with id={entity_id!r} not found", entity_type, entity_id
        )


class EntityAlreadyExistsError(DomainError):
    kind = DomainErrorKind.ALREADY_EXISTS

    def __init__(
        self,
        entity_type: str,
        details: dict[str, Any] | None = None,
        entity_id: str | None = None,
    ) -> None:
        super().__init__(
            f"{entity_type} already exists", entity_type, entity_id, details
        )


class EntityCouldNotBeCreatedError(DomainError):
    kind = DomainErrorKind.COULD_NOT_BE_CREATED

    def __init__(self, entity_type: str, reason: str | None = None) -> None:
        super().__init__(
            f"{entity_type} could not be created",
            entity_type,
            details={"reason": reason} if reason else None,
        )


class EntityCouldNotBeUpdatedError(DomainError):
    kind = DomainErrorKind.COULD_NOT_BE_UPDATED

    def __init__(
        self, entity_type: str, entity_id: str | None, reason: str | None = None
    ) -> None:
        super().__init__(
            f"{entity_type} with id={entity_id!r} could not be updated",
            entity_type,
            entity_id,
            {"reason": reason} if reason else None,
        )


class EntityCouldNotBeDeletedError(DomainError):
    kind = DomainErrorKind.COULD_NOT_BE_DELETED

    def __init__(
        self, entity_type: str, entity_id: str | None, reason: str | None = None
    ) -> None:
        super().__init__(
            f"{entity_type} with id={entity_id!r} could not be deleted",
            entity_type,
            entity_id,
            {"reason": reason} if reason else None,
        )


class SpecificationViolatedError(DomainError):
    """A domain rule was not satisfied by a candidate.

    ``rule_name`` is the stable key the rule declares for itself; boundary
    tables are keyed by it.
    """

    kind = DomainErrorKind.SPECIFICATION_VIOLATED

    def __init__(
        self,
        rule_name: str,
        entity_type: str,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.rule_name = rule_name
        super().__init__(
            f"{entity_type} with id={entity_id!r} violates {rule_name} specification",
            entity_type,
            entity_id,
            details,
        )

    def to_dict(self) -> dict[str, Any]:
        return {**super().to_dict(), "rule_name": self.rule_name}


class MismatchedRevisionError(DomainError):
    """The caller's view of an entity is older than the stored state."""

    kind = DomainErrorKind.MISMATCHED_REVISION

    def __init__(
        self,
        entity_type: str,
        entity_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            f"{entity_type} with id={entity_id!r} has a mismatched revision",
            entity_type,
            entity_id,
            details,
        )


class InvalidAttributeError(DomainError):
    """A single attribute failed a field rule."""

    kind = DomainErrorKind.INVALID_ATTRIBUTE

    def __init__(
        self,
        entity_type: str,
        field_path: str,
        constraint: str,
        entity_id: str | None = None,
    ) -> None:
        self.field_path = field_path
        self.constraint = constraint
        super().__init__(
            f"Attribute {field_path!r} of {entity_type} violates {constraint!r}",
            entity_type,
            entity_id,
            {"field_path": field_path, "constraint": constraint},
        )

    @classmethod
    def from_validation_result(
        cls, entity_type: str, result: ValidationResult
    ) -> InvalidAttributeError:
        """Build the error from the first failing field of *result*."""
        field_path, constraint = result.first_error()
        return cls(entity_type, field_path, constraint)


class ValidationError(DbiamError):
    """Raised when structured validation fails.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))


class InfrastructureError(DbiamError):
    """Base class for all infrastructure-related errors."""


class PersistenceError(InfrastructureError):
    """Base class for all persistence-related errors."""
