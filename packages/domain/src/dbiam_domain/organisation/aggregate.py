from __future__ import annotations

from enum import Enum

from dbiam_core.domain.aggregate import AggregateRoot
from dbiam_core.validation.rules import Constraint, FieldRule


class OrganisationsTyp(str, Enum):
    ROOT = "ROOT"
    LAND = "LAND"
    TRAEGER = "TRAEGER"
    SCHULE = "SCHULE"
    KLASSE = "KLASSE"
    ANBIETER = "ANBIETER"
    SONSTIGE = "SONSTIGE ORGANISATION / EINRICHTUNG"
    UNBESTAETIGT = "UNBESTAETIGT"


class Organisation(AggregateRoot):
    """A node of the school structure: a state, a school, a class, ...

    ``administriert_von`` points at the administering organisation (the
    SCHULE of a KLASSE), ``zugehoerig_zu`` at the organisation it belongs to.
    """

    kennung: str | None = None
    name: str | None = None
    namensergaenzung: str | None = None
    kuerzel: str | None = None
    typ: OrganisationsTyp | None = None
    administriert_von: str | None = None
    zugehoerig_zu: str | None = None


ORGANISATION_FIELD_RULES = (
    FieldRule("kennung", Constraint.MAX_LENGTH, 64),
    FieldRule("kennung", Constraint.NO_SURROUNDING_WHITESPACE),
    FieldRule("name", Constraint.MAX_LENGTH, 255),
    FieldRule("name", Constraint.NO_SURROUNDING_WHITESPACE),
    FieldRule("namensergaenzung", Constraint.MAX_LENGTH, 255),
    FieldRule("kuerzel", Constraint.MAX_LENGTH, 64),
)
