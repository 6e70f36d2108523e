from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.ports.paging import Paged
from dbiam_core.primitives.exceptions import (
    EntityCouldNotBeCreatedError,
    EntityNotFoundError,
    PersistenceError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_specifications.operators import ScopeOperator, ScopeOrder
from dbiam_specifications.pipeline import validate

from ..paging import effective_limit
from .aggregate import Rolle, RollenArt
from .rules import RoleNameWithoutSurroundingSpace
from .scope import RolleScope

if TYPE_CHECKING:
    from dbiam_core.config import DbiamSettings
    from dbiam_core.ports.repository import IRepository
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

logger = logging.getLogger("dbiam.domain.rolle")


class RolleService:
    """Creates roles; listing lets storage failures propagate."""

    def __init__(
        self,
        rolle_repo: IRepository[Rolle],
        organisation_repo: IRepository,
        settings: DbiamSettings | None = None,
    ) -> None:
        self.rolle_repo = rolle_repo
        self.organisation_repo = organisation_repo
        self.settings = settings

    async def create_rolle(self, rolle: Rolle) -> Result[Rolle, DomainError]:
        """Store *rolle*; its administering organisation must exist."""
        verdict = await validate(rolle, [RoleNameWithoutSurroundingSpace()])
        if isinstance(verdict, Err):
            return verdict

        knoten = rolle.administered_by_schulstrukturknoten
        try:
            if knoten is None or await self.organisation_repo.get(knoten) is None:
                return Err(EntityNotFoundError("Organisation", knoten))
            saved = await self.rolle_repo.save(rolle)
        except PersistenceError as e:
            logger.exception("Rolle %s could not be stored", rolle.name)
            return Err(EntityCouldNotBeCreatedError("Rolle", reason=str(e)))
        return Ok(saved)

    async def find_rollen(
        self,
        name: str | None = None,
        rollenart: RollenArt | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> Paged[Rolle]:
        limit = effective_limit(limit, self.settings)
        scope = (
            RolleScope()
            .find_by({"name": name, "rollenart": rollenart}, ScopeOperator.AND)
            .sort_by("name", ScopeOrder.ASC)
            .paged(offset, limit)
        )
        counted = await scope.execute(self.rolle_repo)
        return Paged.from_counted(counted, offset, limit)
