"""Specification pattern primitives."""

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..primitives.exceptions import DomainError

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for asynchronous domain rules.

    ``is_satisfied_by`` may consult read-only repositories but must never
    mutate the candidate or any store.  ``violation`` builds the domain
    error the rule stands for; ``rule_name`` is its stable key.
    """

    rule_name: str

    async def is_satisfied_by(self, candidate: T) -> bool: ...

    def violation(self, candidate: T) -> "DomainError": ...


def candidate_id(candidate: Any) -> str | None:
    """Best-effort identifier of a candidate for error context."""
    value = getattr(candidate, "id", None)
    return str(value) if value is not None else None
