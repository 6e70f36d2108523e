"""
Rules an organisation must satisfy before it is stored.

Each rule documents when it is *not* satisfied.  A missing collaborator
entity is never an exception here; it is reported as an unsatisfied rule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dbiam_specifications.base import BaseSpecification
from dbiam_specifications.operators import ScopeOperator

from .aggregate import Organisation, OrganisationsTyp
from .scope import OrganisationScope

if TYPE_CHECKING:
    from dbiam_core.ports.repository import IRepository


class _OrganisationRule(BaseSpecification[Organisation]):
    entity_type = "Organisation"


class NameRequiredForClass(_OrganisationRule):
    """Not satisfied when a KLASSE has no name or an empty one."""

    rule_name = "NAME_REQUIRED_FOR_KLASSE"

    async def is_satisfied_by(self, candidate: Organisation) -> bool:
        if candidate.typ is not OrganisationsTyp.KLASSE:
            return True
        return bool(candidate.name)


class IdentifierRequiredForSchool(_OrganisationRule):
    """Not satisfied when a SCHULE has no kennung or an empty one."""

    rule_name = "KENNUNG_REQUIRED_FOR_SCHULE"

    async def is_satisfied_by(self, candidate: Organisation) -> bool:
        if candidate.typ is not OrganisationsTyp.SCHULE:
            return True
        return bool(candidate.kennung)


class ClassAdministeredBySchool(_OrganisationRule):
    """
    Not satisfied when a KLASSE has no administering organisation, when
    that organisation does not exist, or when it is not a SCHULE.
    """

    rule_name = "KLASSE_NUR_VON_SCHULE_ADMINISTRIERT"

    def __init__(self, organisation_repo: IRepository[Organisation]) -> None:
        self.organisation_repo = organisation_repo

    async def is_satisfied_by(self, candidate: Organisation) -> bool:
        if candidate.typ is not OrganisationsTyp.KLASSE:
            return True
        if candidate.administriert_von is None:
            return False
        parent = await self.organisation_repo.get(candidate.administriert_von)
        if parent is None:
            return False
        return parent.typ is OrganisationsTyp.SCHULE


class ClassNameUniqueAtSchool(_OrganisationRule):
    """
    Not satisfied when another KLASSE administered by the same organisation
    already carries the candidate's name.  A KLASSE without administering
    organisation is left to :class:`ClassAdministeredBySchool`.
    """

    rule_name = "KLASSENNAME_AN_SCHULE_EINDEUTIG"

    def __init__(self, organisation_repo: IRepository[Organisation]) -> None:
        self.organisation_repo = organisation_repo

    async def is_satisfied_by(self, candidate: Organisation) -> bool:
        if candidate.typ is not OrganisationsTyp.KLASSE:
            return True
        if candidate.administriert_von is None or candidate.name is None:
            return True
        scope = OrganisationScope().find_by(
            {
                "typ": OrganisationsTyp.KLASSE,
                "administriert_von": candidate.administriert_von,
                "name": candidate.name,
            },
            ScopeOperator.AND,
        )
        klassen, _ = await scope.execute(self.organisation_repo)
        return all(klasse.id == candidate.id for klasse in klassen)


def organisation_rules(
    organisation_repo: IRepository[Organisation],
) -> list[BaseSpecification[Organisation]]:
    """The rules checked on every organisation create, in order."""
    return [
        IdentifierRequiredForSchool(),
        NameRequiredForClass(),
        ClassAdministeredBySchool(organisation_repo),
        ClassNameUniqueAtSchool(organisation_repo),
    ]
