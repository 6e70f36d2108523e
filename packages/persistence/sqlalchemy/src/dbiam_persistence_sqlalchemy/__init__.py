"""SQLAlchemy Persistence Adapter."""

from __future__ import annotations

from .core.model_mapper import ModelMapper
from .core.models import Base, EntityMixin
from .core.repository import SQLAlchemyRepository
from .core.uow import SQLAlchemyUnitOfWork
from .engine import create_engine, create_schema, create_session_factory
from .exceptions import (
    MappingError,
    RepositoryError,
    SessionManagementError,
    SQLAlchemyPersistenceError,
    UnitOfWorkError,
)
from .repositories import Repositories, build_repositories
from .scope import compile_scope

__all__ = [
    # Core
    "Base",
    "EntityMixin",
    "ModelMapper",
    "SQLAlchemyRepository",
    "SQLAlchemyUnitOfWork",
    "Repositories",
    "build_repositories",
    "compile_scope",
    # Engine
    "create_engine",
    "create_schema",
    "create_session_factory",
    # Exceptions
    "MappingError",
    "RepositoryError",
    "SessionManagementError",
    "SQLAlchemyPersistenceError",
    "UnitOfWorkError",
]
