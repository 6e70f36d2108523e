"""Asynchronous specifications and their logical composites.

Composites evaluate their operands one after another and stop as soon as
the outcome is known, so an operand that is skipped performs no repository
calls at all.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from dbiam_core.domain.specification import ISpecification, candidate_id
from dbiam_core.primitives.exceptions import DomainError, SpecificationViolatedError

T = TypeVar("T")


class BaseSpecification(ABC, Generic[T]):
    """Base class for rules with logic operator support.

    Concrete rules set ``rule_name`` (the stable key used by error tables)
    and ``entity_type``, and implement :meth:`is_satisfied_by`.  Rules that
    stand for a different error kind override :meth:`violation`.
    """

    rule_name: str = "SPECIFICATION"
    entity_type: str = "Entity"

    @abstractmethod
    async def is_satisfied_by(self, candidate: T) -> bool: ...

    def violation(self, candidate: T) -> DomainError:
        return SpecificationViolatedError(
            self.rule_name, self.entity_type, candidate_id(candidate)
        )

    def and_(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def or_(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def not_(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return self.and_(other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return self.or_(other)

    def __invert__(self) -> NotSpecification[T]:
        return self.not_()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.rule_name})"


class _CompositeSpecification(BaseSpecification[T]):
    _joiner: str

    def __init__(self, *specifications: ISpecification[T], name: str | None = None) -> None:
        if not specifications:
            raise ValueError(f"{type(self).__name__} needs at least one operand")
        self.specifications = specifications
        self.rule_name = name or self._joiner.join(
            spec.rule_name for spec in specifications
        )
        self.entity_type = getattr(specifications[0], "entity_type", self.entity_type)


class AndSpecification(_CompositeSpecification[T]):
    """Logical AND; stops at the first unsatisfied operand."""

    _joiner = "_AND_"

    async def is_satisfied_by(self, candidate: T) -> bool:
        for spec in self.specifications:
            if not await spec.is_satisfied_by(candidate):
                return False
        return True


class OrSpecification(_CompositeSpecification[T]):
    """Logical OR; stops at the first satisfied operand."""

    _joiner = "_OR_"

    async def is_satisfied_by(self, candidate: T) -> bool:
        for spec in self.specifications:
            if await spec.is_satisfied_by(candidate):
                return True
        return False


class NotSpecification(BaseSpecification[T]):
    """Logical NOT."""

    def __init__(self, specification: ISpecification[T], name: str | None = None) -> None:
        self.specification = specification
        self.rule_name = name or f"NOT_{specification.rule_name}"
        self.entity_type = getattr(specification, "entity_type", self.entity_type)

    async def is_satisfied_by(self, candidate: T) -> bool:
        return not await self.specification.is_satisfied_by(candidate)


class PredicateSpecification(BaseSpecification[T]):
    """Wraps a plain synchronous predicate as a rule.

    Handy for field-presence checks that need no collaborators::

        has_name = PredicateSpecification(
            lambda org: bool(org.name), rule_name="NAME_REQUIRED"
        )
    """

    def __init__(
        self,
        predicate: Any,
        *,
        rule_name: str,
        entity_type: str = "Entity",
    ) -> None:
        self._predicate = predicate
        self.rule_name = rule_name
        self.entity_type = entity_type

    async def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(candidate))
