from __future__ import annotations

from dbiam_specifications.scope import ScopeBase

from .aggregate import Person


class PersonScope(ScopeBase[Person]):
    entity_cls = Person
