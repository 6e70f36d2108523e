from __future__ import annotations

from dbiam_specifications.base import BaseSpecification

from .aggregate import Rolle


class RoleNameWithoutSurroundingSpace(BaseSpecification[Rolle]):
    """Not satisfied when the name starts or ends with whitespace."""

    rule_name = "NAME_MIT_LEERZEICHEN"
    entity_type = "Rolle"

    async def is_satisfied_by(self, candidate: Rolle) -> bool:
        if candidate.name is None:
            return True
        return candidate.name == candidate.name.strip()
