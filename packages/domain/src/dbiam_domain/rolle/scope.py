from __future__ import annotations

from dbiam_specifications.scope import ScopeBase

from .aggregate import Rolle


class RolleScope(ScopeBase[Rolle]):
    entity_cls = Rolle
