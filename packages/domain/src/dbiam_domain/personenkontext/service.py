from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.primitives.exceptions import (
    EntityAlreadyExistsError,
    EntityCouldNotBeCreatedError,
    EntityCouldNotBeDeletedError,
    EntityNotFoundError,
    PersistenceError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_specifications.operators import ScopeOperator, ScopeOrder
from dbiam_specifications.pipeline import SpecificationPipeline

from .aggregate import Personenkontext
from .rules import OnlyTeachersAndLearnersAtClass, SameRoleAtClassAsSchool
from .scope import PersonenkontextScope
from .update import PersonenkontexteUpdate

if TYPE_CHECKING:
    from datetime import datetime

    from dbiam_core.ports.repository import IRepository
    from dbiam_core.ports.unit_of_work import UnitOfWork
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

    from ..organisation.aggregate import Organisation
    from ..person.aggregate import Person
    from ..rolle.aggregate import Rolle

logger = logging.getLogger("dbiam.domain.personenkontext")


class PersonenkontextService:
    """
    Create, delete, list and bulk-replace role assignments.

    Storage failures on the create, delete and update paths come back as
    ``COULD_NOT_BE_*`` errors; :meth:`find_by_person` lets them propagate.
    Passing the unit of work the repositories are bound to makes
    :meth:`update_personenkontexte` all-or-nothing.
    """

    def __init__(
        self,
        personenkontext_repo: IRepository[Personenkontext],
        person_repo: IRepository[Person],
        organisation_repo: IRepository[Organisation],
        rolle_repo: IRepository[Rolle],
        uow: UnitOfWork | None = None,
    ) -> None:
        self.personenkontext_repo = personenkontext_repo
        self.person_repo = person_repo
        self.organisation_repo = organisation_repo
        self.rolle_repo = rolle_repo
        self.uow = uow

    def creation_rules(self) -> SpecificationPipeline[Personenkontext]:
        return SpecificationPipeline(
            [
                OnlyTeachersAndLearnersAtClass(self.organisation_repo, self.rolle_repo),
                SameRoleAtClassAsSchool(
                    self.organisation_repo, self.personenkontext_repo, self.rolle_repo
                ),
            ]
        )

    async def _find_triple(self, kontext: Personenkontext) -> Personenkontext | None:
        scope = (
            PersonenkontextScope()
            .find_by(
                {
                    "person_id": kontext.person_id,
                    "organisation_id": kontext.organisation_id,
                    "rolle_id": kontext.rolle_id,
                },
                ScopeOperator.AND,
            )
            .paged(offset=0, limit=1)
        )
        items, _ = await scope.execute(self.personenkontext_repo)
        return items[0] if items else None

    async def create_personenkontext(
        self, kontext: Personenkontext
    ) -> Result[Personenkontext, DomainError]:
        try:
            return await self._create(kontext)
        except PersistenceError as e:
            logger.exception("Personenkontext for %s could not be stored", kontext.person_id)
            return Err(EntityCouldNotBeCreatedError("Personenkontext", reason=str(e)))

    async def _create(self, kontext: Personenkontext) -> Result[Personenkontext, DomainError]:
        if await self.person_repo.get(kontext.person_id) is None:
            return Err(EntityNotFoundError("Person", kontext.person_id))

        verdict = await self.creation_rules().validate(kontext)
        if isinstance(verdict, Err):
            return verdict

        if await self._find_triple(kontext) is not None:
            return Err(
                EntityAlreadyExistsError(
                    "Personenkontext",
                    details={
                        "person_id": kontext.person_id,
                        "organisation_id": kontext.organisation_id,
                        "rolle_id": kontext.rolle_id,
                    },
                )
            )
        return Ok(await self.personenkontext_repo.save(kontext))

    async def delete_personenkontext(
        self, kontext_id: str
    ) -> Result[None, DomainError]:
        try:
            deleted = await self.personenkontext_repo.delete(kontext_id)
        except PersistenceError as e:
            logger.exception("Personenkontext %s could not be deleted", kontext_id)
            return Err(EntityCouldNotBeDeletedError("Personenkontext", kontext_id, str(e)))
        if not deleted:
            return Err(EntityNotFoundError("Personenkontext", kontext_id))
        return Ok(None)

    async def find_by_person(self, person_id: str) -> list[Personenkontext]:
        scope = (
            PersonenkontextScope()
            .of_person(person_id)
            .sort_by("organisation_id", ScopeOrder.ASC)
            .sort_by("rolle_id", ScopeOrder.ASC)
        )
        items, _ = await scope.execute(self.personenkontext_repo)
        return items

    async def update_personenkontexte(
        self,
        person_id: str,
        last_modified: datetime,
        count: int,
        sent: list[Personenkontext],
    ) -> Result[list[Personenkontext], DomainError]:
        update = PersonenkontexteUpdate(
            self.personenkontext_repo,
            person_id,
            last_modified,
            count,
            sent,
            uow=self.uow,
        )
        return await update.apply()
