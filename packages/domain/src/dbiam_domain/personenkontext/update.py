"""
Bulk replacement of one person's role assignments.

The caller sends the complete desired set of assignments together with
the number of assignments it saw and the most recent modification time it
saw.  The update is applied only if the stored state still matches that
view::

    update = PersonenkontexteUpdate(
        personenkontext_repo, person_id, last_modified, count=2, sent=kontexte,
        uow=uow,
    )
    result = await update.apply()

Stored assignments missing from ``sent`` are deleted, sent assignments not
yet stored are added, the rest stay untouched.  With a unit of work the
deletes and adds run inside one savepoint, so a failing write leaves the
stored set as it was.  A naive ``last_modified`` is read as UTC.
"""

from __future__ import annotations

import contextlib
import logging
from datetime import timezone
from typing import TYPE_CHECKING

from dbiam_core.primitives.exceptions import (
    EntityCouldNotBeDeletedError,
    EntityCouldNotBeUpdatedError,
    PersistenceError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_specifications.pipeline import SpecificationPipeline

from .aggregate import Personenkontext
from .rules import AssignmentCountMatches, AssignmentsNotOutdated, PersonIdsMatch
from .scope import PersonenkontextScope

if TYPE_CHECKING:
    from contextlib import AbstractAsyncContextManager
    from datetime import datetime

    from dbiam_core.ports.repository import IRepository
    from dbiam_core.ports.unit_of_work import UnitOfWork
    from dbiam_core.primitives.exceptions import DomainError
    from dbiam_core.primitives.result import Result

logger = logging.getLogger("dbiam.domain.personenkontext")


class _WriteFailed(Exception):
    """Aborts the write phase; carries the error handed to the caller."""

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error


class PersonenkontexteUpdate:
    def __init__(
        self,
        personenkontext_repo: IRepository[Personenkontext],
        person_id: str,
        last_modified: datetime,
        count: int,
        sent: list[Personenkontext],
        uow: UnitOfWork | None = None,
    ) -> None:
        self.personenkontext_repo = personenkontext_repo
        self.person_id = person_id
        if last_modified.tzinfo is None:
            last_modified = last_modified.replace(tzinfo=timezone.utc)
        self.last_modified = last_modified
        self.count = count
        self.sent = list(sent)
        self.uow = uow
        self.existing: list[Personenkontext] = []

    async def _load_existing(self) -> list[Personenkontext]:
        items, _ = await PersonenkontextScope().of_person(self.person_id).execute(
            self.personenkontext_repo
        )
        return items

    def _savepoint(self) -> AbstractAsyncContextManager[None]:
        if self.uow is None:
            return contextlib.nullcontext()
        return self.uow.savepoint()

    async def apply(self) -> Result[list[Personenkontext], DomainError]:
        """Validate against the stored state, then delete and add."""
        try:
            self.existing = await self._load_existing()
            verdict = await SpecificationPipeline(
                [PersonIdsMatch(), AssignmentCountMatches(), AssignmentsNotOutdated()]
            ).validate(self)
            if isinstance(verdict, Err):
                return verdict

            async with self._savepoint():
                await self._write()

            return Ok(await self._load_existing())
        except _WriteFailed as e:
            return Err(e.error)
        except PersistenceError as e:
            logger.exception("Updating Personenkontexte of %s failed", self.person_id)
            return Err(EntityCouldNotBeUpdatedError("Personenkontext", self.person_id, str(e)))

    async def _write(self) -> None:
        sent_keys = {kontext.key for kontext in self.sent}
        existing_keys = {kontext.key for kontext in self.existing}

        for kontext in self.existing:
            if kontext.key in sent_keys:
                continue
            logger.info("DELETE Personenkontext with %s, %s, %s", *kontext.key)
            try:
                deleted = await self.personenkontext_repo.delete(kontext.id)  # type: ignore[arg-type]
            except PersistenceError as e:
                logger.exception("Deleting Personenkontext %s failed", kontext.id)
                raise _WriteFailed(
                    EntityCouldNotBeDeletedError("Personenkontext", kontext.id, str(e))
                ) from e
            if not deleted:
                raise _WriteFailed(EntityCouldNotBeDeletedError("Personenkontext", kontext.id))

        added: set[tuple[str, str, str]] = set()
        for kontext in self.sent:
            if kontext.key in existing_keys or kontext.key in added:
                continue
            logger.info("ADD Personenkontext with %s, %s, %s", *kontext.key)
            try:
                await self.personenkontext_repo.save(
                    Personenkontext(
                        person_id=kontext.person_id,
                        organisation_id=kontext.organisation_id,
                        rolle_id=kontext.rolle_id,
                    )
                )
            except PersistenceError as e:
                logger.exception("Adding Personenkontext for %s failed", self.person_id)
                raise _WriteFailed(
                    EntityCouldNotBeUpdatedError("Personenkontext", self.person_id, str(e))
                ) from e
            added.add(kontext.key)
