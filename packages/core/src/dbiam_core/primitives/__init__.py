"""Primitives: exceptions, results, ID generation."""

from __future__ import annotations

from .exceptions import (
    DbiamError,
    DomainError,
    DomainErrorKind,
    EntityAlreadyExistsError,
    EntityCouldNotBeCreatedError,
    EntityCouldNotBeDeletedError,
    EntityCouldNotBeUpdatedError,
    EntityNotFoundError,
    InfrastructureError,
    InvalidAttributeError,
    MismatchedRevisionError,
    PersistenceError,
    SpecificationViolatedError,
    ValidationError,
)
from .id_generator import IIDGenerator, UUID4Generator
from .result import Err, Ok, Result

__all__ = [
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
]
