"""
Composite validation pipeline.

Runs an ordered list of rules against one candidate and turns the first
failing rule into that rule's own domain error::

    pipeline = SpecificationPipeline(
        [
            OnlyTeachersAndLearnersAtClass(organisation_repo, rolle_repo),
            SameRoleAtClassAsSchool(organisation_repo, personenkontext_repo),
        ]
    )
    result = await pipeline.validate(personenkontext)
    if not result.ok:
        return result

Rules run strictly in declaration order; once one fails no later rule is
evaluated, so later rules perform no repository calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from dbiam_core.primitives.result import Err, Ok

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dbiam_core.domain.specification import ISpecification
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

T = TypeVar("T")

logger = logging.getLogger("dbiam.specifications")


class SpecificationPipeline(Generic[T]):
    def __init__(self, rules: Iterable[ISpecification[T]] = ()) -> None:
        self._rules: list[ISpecification[T]] = list(rules)

    @property
    def rules(self) -> tuple[ISpecification[T], ...]:
        return tuple(self._rules)

    def add(self, rule: ISpecification[T]) -> SpecificationPipeline[T]:
        """Append *rule*; it runs after every rule added before it."""
        self._rules.append(rule)
        return self

    async def validate(self, candidate: T) -> Result[None, DomainError]:
        for rule in self._rules:
            if not await rule.is_satisfied_by(candidate):
                error = rule.violation(candidate)
                logger.info(
                    "Rule %s not satisfied by %s (%s)",
                    rule.rule_name,
                    error.entity_type,
                    error.kind.value,
                )
                return Err(error)
        return Ok(None)

    def __len__(self) -> int:
        return len(self._rules)


async def validate(
    candidate: Any, rules: Iterable[ISpecification[Any]]
) -> Result[None, DomainError]:
    """Shorthand for ``SpecificationPipeline(rules).validate(candidate)``."""
    return await SpecificationPipeline(rules).validate(candidate)
