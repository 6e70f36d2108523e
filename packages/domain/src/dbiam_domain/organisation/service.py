from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.ports.paging import Paged
from dbiam_core.primitives.exceptions import (
    EntityCouldNotBeCreatedError,
    EntityNotFoundError,
    InvalidAttributeError,
    PersistenceError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_core.validation.rules import validate_fields
from dbiam_specifications.operators import ScopeOperator, ScopeOrder
from dbiam_specifications.pipeline import SpecificationPipeline

from ..paging import effective_limit
from .aggregate import ORGANISATION_FIELD_RULES, Organisation, OrganisationsTyp
from .rules import organisation_rules
from .scope import OrganisationScope

if TYPE_CHECKING:
    from dbiam_core.config import DbiamSettings
    from dbiam_core.ports.repository import IRepository
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

logger = logging.getLogger("dbiam.domain.organisation")


class OrganisationService:
    """
    Creates and lists organisations.

    ``create_organisation`` reports storage failures as
    ``COULD_NOT_BE_CREATED``; the lookups and listings let a
    :class:`PersistenceError` propagate to the caller.
    """

    def __init__(
        self,
        organisation_repo: IRepository[Organisation],
        settings: DbiamSettings | None = None,
    ) -> None:
        self.organisation_repo = organisation_repo
        self.settings = settings

    async def create_organisation(
        self, organisation: Organisation
    ) -> Result[Organisation, DomainError]:
        """Check field rules and organisation rules, then store."""
        validation = validate_fields(organisation, ORGANISATION_FIELD_RULES)
        if not validation:
            return Err(
                InvalidAttributeError.from_validation_result("Organisation", validation)
            )

        try:
            verdict = await SpecificationPipeline(
                organisation_rules(self.organisation_repo)
            ).validate(organisation)
            if isinstance(verdict, Err):
                return verdict
            saved = await self.organisation_repo.save(organisation)
        except PersistenceError as e:
            logger.exception("Organisation %s could not be stored", organisation.kennung)
            return Err(EntityCouldNotBeCreatedError("Organisation", reason=str(e)))

        logger.info("Created organisation %s (%s)", saved.id, saved.typ)
        return Ok(saved)

    async def find_organisation_by_id(
        self, organisation_id: str
    ) -> Result[Organisation, DomainError]:
        organisation = await self.organisation_repo.get(organisation_id)
        if organisation is None:
            return Err(EntityNotFoundError("Organisation", organisation_id))
        return Ok(organisation)

    async def find_all_organisations(
        self,
        kennung: str | None = None,
        name: str | None = None,
        typ: OrganisationsTyp | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Paged[Organisation]:
        """List organisations ordered by kennung; unset filters match all."""
        limit = effective_limit(limit, self.settings)
        scope = (
            OrganisationScope()
            .find_by({"kennung": kennung, "name": name, "typ": typ}, ScopeOperator.AND)
            .sort_by("kennung", ScopeOrder.ASC)
            .paged(offset, limit)
        )
        counted = await scope.execute(self.organisation_repo)
        return Paged.from_counted(counted, offset, limit)

    async def find_administrated_by(
        self,
        parent_id: str,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Result[Paged[Organisation], DomainError]:
        """Organisations administered by *parent_id*, ordered by name."""
        if await self.organisation_repo.get(parent_id) is None:
            return Err(EntityNotFoundError("Organisation", parent_id))
        limit = effective_limit(limit, self.settings)
        scope = (
            OrganisationScope()
            .find_by({"administriert_von": parent_id}, ScopeOperator.AND)
            .sort_by("name", ScopeOrder.ASC)
            .paged(offset, limit)
        )
        counted = await scope.execute(self.organisation_repo)
        return Ok(Paged.from_counted(counted, offset, limit))
