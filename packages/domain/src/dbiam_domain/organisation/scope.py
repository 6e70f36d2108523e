from __future__ import annotations

from dbiam_specifications.scope import ScopeBase

from .aggregate import Organisation


class OrganisationScope(ScopeBase[Organisation]):
    entity_cls = Organisation
