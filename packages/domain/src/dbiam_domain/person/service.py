from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.ports.paging import Paged
from dbiam_core.primitives.exceptions import (
    EntityAlreadyExistsError,
    EntityCouldNotBeCreatedError,
    EntityNotFoundError,
    InvalidAttributeError,
    PersistenceError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_core.validation.rules import validate_fields
from dbiam_specifications.operators import ScopeOperator, ScopeOrder

from ..paging import effective_limit
from .aggregate import PERSON_FIELD_RULES, Person
from .scope import PersonScope

if TYPE_CHECKING:
    from dbiam_core.config import DbiamSettings
    from dbiam_core.ports.repository import IRepository
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

logger = logging.getLogger("dbiam.domain.person")


class PersonService:
    def __init__(
        self,
        person_repo: IRepository[Person],
        settings: DbiamSettings | None = None,
    ) -> None:
        self.person_repo = person_repo
        self.settings = settings

    async def create_person(self, person: Person) -> Result[Person, DomainError]:
        """
        Store a new person.

        Fails with ``ALREADY_EXISTS`` when another person carries the same
        referrer; a person without referrer is never a duplicate.
        """
        validation = validate_fields(person, PERSON_FIELD_RULES)
        if not validation:
            return Err(InvalidAttributeError.from_validation_result("Person", validation))

        try:
            if await self._referrer_taken(person.referrer):
                logger.info("Person with referrer %s already exists", person.referrer)
                return Err(
                    EntityAlreadyExistsError(
                        "Person", details={"referrer": person.referrer}
                    )
                )
            saved = await self.person_repo.save(person)
        except PersistenceError as e:
            logger.exception("Person %s could not be stored", person.referrer)
            return Err(EntityCouldNotBeCreatedError("Person", reason=str(e)))

        logger.info("Created person %s", saved.id)
        return Ok(saved)

    async def _referrer_taken(self, referrer: str | None) -> bool:
        if referrer is None:
            return False
        scope = (
            PersonScope()
            .find_by({"referrer": referrer}, ScopeOperator.AND)
            .paged(offset=0, limit=1)
        )
        _, total = await scope.execute(self.person_repo)
        return total > 0

    async def find_person_by_id(self, person_id: str) -> Result[Person, DomainError]:
        person = await self.person_repo.get(person_id)
        if person is None:
            return Err(EntityNotFoundError("Person", person_id))
        return Ok(person)

    async def find_persons(
        self,
        referrer: str | None = None,
        vorname: str | None = None,
        familienname: str | None = None,
        is_information_blocked: bool | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Paged[Person]:
        """
        List persons ordered by familienname, then vorname.

        ``is_information_blocked`` selects by visibility; ``None`` lists
        blocked and visible persons alike.  Storage failures propagate.
        """
        limit = effective_limit(limit, self.settings)
        scope = (
            PersonScope()
            .find_by(
                {
                    "referrer": referrer,
                    "vorname": vorname,
                    "familienname": familienname,
                    "is_information_blocked": is_information_blocked,
                },
                ScopeOperator.AND,
            )
            .sort_by("familienname", ScopeOrder.ASC)
            .sort_by("vorname", ScopeOrder.ASC)
            .paged(offset, limit)
        )
        counted = await scope.execute(self.person_repo)
        return Paged.from_counted(counted, offset, limit)
