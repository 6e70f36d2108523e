from __future__ import annotations

from dbiam_core.domain.aggregate import AggregateRoot


class Personenkontext(AggregateRoot):
    """Assignment of a role to a person at one organisation.

    The triple ``(person_id, organisation_id, rolle_id)`` is unique.
    ``updated_at`` doubles as the revision checked by bulk updates.
    """

    person_id: str
    organisation_id: str
    rolle_id: str

    @property
    def key(self) -> tuple[str, str, str]:
        return self.person_id, self.organisation_id, self.rolle_id
