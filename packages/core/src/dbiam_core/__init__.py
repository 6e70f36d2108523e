"""dbiam-core: Foundation package for the dBildungs-IAM kernel.

Aggregates, the domain error taxonomy, results, repository ports, field
validation and in-memory adapters.  No database dependencies.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemoryRepository, InMemoryUnitOfWork
from .config import DbiamSettings, DeployStage, get_settings

# ── Domain ───────────────────────────────────────────────────────
from .domain import AggregateRoot, ValueObject
from .logging_config import configure_logging

# ── Ports ────────────────────────────────────────────────────────
from .ports import Counted, IQueryScope, IRepository, IScopeStore, Paged, UnitOfWork

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    DbiamError,
    DomainError,
    DomainErrorKind,
    EntityAlreadyExistsError,
    EntityCouldNotBeCreatedError,
    EntityCouldNotBeDeletedError,
    EntityCouldNotBeUpdatedError,
    EntityNotFoundError,
    Err,
    IIDGenerator,
    InfrastructureError,
    InvalidAttributeError,
    MismatchedRevisionError,
    Ok,
    PersistenceError,
    Result,
    SpecificationViolatedError,
    UUID4Generator,
    ValidationError,
)

# ── Validation ──────────────────────────────────────────────────
from .validation import (
    Constraint,
    FieldRule,
    PydanticValidator,
    ValidationResult,
    validate_fields,
)

__all__: list[str] = [
    # Domain
    "AggregateRoot",
    "ValueObject",
    # Ports
    "Counted",
    "IQueryScope",
    "IRepository",
    "IScopeStore",
    "Paged",
    "UnitOfWork",
    # Validation
    "Constraint",
    "FieldRule",
    "PydanticValidator",
    "ValidationResult",
    "validate_fields",
    # Primitives
    "DbiamError",
    "DomainError",
    "DomainErrorKind",
    "EntityAlreadyExistsError",
    "EntityCouldNotBeCreatedError",
    "EntityCouldNotBeDeletedError",
    "EntityCouldNotBeUpdatedError",
    "EntityNotFoundError",
    "Err",
    "IIDGenerator",
    "InfrastructureError",
    "InvalidAttributeError",
    "MismatchedRevisionError",
    "Ok",
    "PersistenceError",
    "Result",
    "SpecificationViolatedError",
    "UUID4Generator",
    "ValidationError",
    # Config / logging
    "DbiamSettings",
    "DeployStage",
    "configure_logging",
    "get_settings",
    # Adapters
    "InMemoryRepository",
    "InMemoryUnitOfWork",
]
