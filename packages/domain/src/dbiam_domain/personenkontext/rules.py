"""
Rules for role assignments.

Creating an assignment checks :class:`OnlyTeachersAndLearnersAtClass` and
:class:`SameRoleAtClassAsSchool`.  A bulk update of a person's assignments
checks :class:`PersonIdsMatch`, :class:`AssignmentCountMatches` and
:class:`AssignmentsNotOutdated` against a
:class:`~dbiam_domain.personenkontext.update.PersonenkontexteUpdate`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.primitives.exceptions import (
    MismatchedRevisionError,
    SpecificationViolatedError,
)
from dbiam_specifications.base import BaseSpecification

from ..organisation.aggregate import OrganisationsTyp
from ..rolle.aggregate import RollenArt
from .aggregate import Personenkontext
from .scope import PersonenkontextScope

if TYPE_CHECKING:
    from dbiam_core.ports.repository import IRepository
    from dbiam_core.primitives.exceptions import DomainError

    from ..organisation.aggregate import Organisation
    from ..rolle.aggregate import Rolle
    from .update import PersonenkontexteUpdate

logger = logging.getLogger("dbiam.domain.personenkontext")


class _PersonenkontextRule(BaseSpecification[Personenkontext]):
    entity_type = "Personenkontext"


class OnlyTeachersAndLearnersAtClass(_PersonenkontextRule):
    """
    At a KLASSE only LEHR and LERN roles may be assigned.

    Not satisfied when the organisation or the role cannot be found, or
    when the organisation is a KLASSE and the role kind is anything else.
    """

    rule_name = "NUR_LEHR_UND_LERN_AN_KLASSE"

    def __init__(
        self,
        organisation_repo: IRepository[Organisation],
        rolle_repo: IRepository[Rolle],
    ) -> None:
        self.organisation_repo = organisation_repo
        self.rolle_repo = rolle_repo

    async def is_satisfied_by(self, candidate: Personenkontext) -> bool:
        organisation = await self.organisation_repo.get(candidate.organisation_id)
        if organisation is None:
            return False
        if organisation.typ is not OrganisationsTyp.KLASSE:
            return True
        rolle = await self.rolle_repo.get(candidate.rolle_id)
        if rolle is None:
            return False
        return rolle.rollenart in (RollenArt.LEHR, RollenArt.LERN)


class SameRoleAtClassAsSchool(_PersonenkontextRule):
    """
    A role at a KLASSE requires the same role at the administering SCHULE.

    Satisfied when the organisation is not a KLASSE.  Not satisfied when
    the organisation cannot be found, when the KLASSE has no administering
    organisation or it cannot be found, when a role of the person at the
    SCHULE cannot be found, or when the person holds no assignment with the
    same role at the SCHULE.
    """

    rule_name = "GLEICHE_ROLLE_AN_KLASSE_WIE_SCHULE"

    def __init__(
        self,
        organisation_repo: IRepository[Organisation],
        personenkontext_repo: IRepository[Personenkontext],
        rolle_repo: IRepository[Rolle],
    ) -> None:
        self.organisation_repo = organisation_repo
        self.personenkontext_repo = personenkontext_repo
        self.rolle_repo = rolle_repo

    async def is_satisfied_by(self, candidate: Personenkontext) -> bool:
        organisation = await self.organisation_repo.get(candidate.organisation_id)
        if organisation is None:
            return False
        if organisation.typ is not OrganisationsTyp.KLASSE:
            return True
        if organisation.administriert_von is None:
            return False

        schule = await self.organisation_repo.get(organisation.administriert_von)
        if schule is None:
            return False

        kontexte, _ = await PersonenkontextScope().of_person(candidate.person_id).execute(
            self.personenkontext_repo
        )
        for kontext in kontexte:
            if kontext.organisation_id != schule.id:
                continue
            rolle_an_schule = await self.rolle_repo.get(kontext.rolle_id)
            if rolle_an_schule is None:
                return False
            if rolle_an_schule.id == candidate.rolle_id:
                return True
        return False


# -- bulk update ---------------------------------------------------------


class _UpdateRule(BaseSpecification["PersonenkontexteUpdate"]):
    entity_type = "Personenkontext"

    def violation(self, candidate: PersonenkontexteUpdate) -> DomainError:
        return SpecificationViolatedError(
            self.rule_name, self.entity_type, candidate.person_id
        )


class PersonIdsMatch(_UpdateRule):
    """Not satisfied when any sent assignment names a different person."""

    rule_name = "PERSON_ID_MISMATCH"

    async def is_satisfied_by(self, candidate: PersonenkontexteUpdate) -> bool:
        return all(sent.person_id == candidate.person_id for sent in candidate.sent)


class AssignmentCountMatches(_UpdateRule):
    """Not satisfied when the stored assignment count differs from the expected one."""

    rule_name = "INVALID_PERSONENKONTEXT_COUNT"

    async def is_satisfied_by(self, candidate: PersonenkontexteUpdate) -> bool:
        return len(candidate.existing) == candidate.count


class AssignmentsNotOutdated(_UpdateRule):
    """
    Not satisfied when any stored assignment was modified after the
    caller's ``last_modified``.  Reported as a mismatched revision.
    """

    rule_name = "PERSONENKONTEXTE_OUTDATED"

    async def is_satisfied_by(self, candidate: PersonenkontexteUpdate) -> bool:
        stamps = [k.updated_at for k in candidate.existing if k.updated_at is not None]
        if not stamps:
            return True
        return max(stamps) <= candidate.last_modified

    def violation(self, candidate: PersonenkontexteUpdate) -> DomainError:
        return MismatchedRevisionError(
            self.entity_type,
            candidate.person_id,
            {"last_modified": candidate.last_modified.isoformat()},
        )
