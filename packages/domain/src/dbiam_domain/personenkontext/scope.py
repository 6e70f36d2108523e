from __future__ import annotations

from dbiam_specifications.operators import ScopeOperator
from dbiam_specifications.scope import ScopeBase

from .aggregate import Personenkontext


class PersonenkontextScope(ScopeBase[Personenkontext]):
    entity_cls = Personenkontext

    def of_person(self, person_id: str) -> PersonenkontextScope:
        return self.find_by({"person_id": person_id}, ScopeOperator.AND)
