from __future__ import annotations

from enum import Enum

from pydantic import Field

from dbiam_core.domain.aggregate import AggregateRoot


class RollenArt(str, Enum):
    LERN = "LERN"
    LEHR = "LEHR"
    EXTERN = "EXTERN"
    ORGADMIN = "ORGADMIN"
    LEIT = "LEIT"
    SYSADMIN = "SYSADMIN"


class RollenMerkmal(str, Enum):
    BEFRISTUNG_PFLICHT = "BEFRISTUNG_PFLICHT"
    KOPERS_PFLICHT = "KOPERS_PFLICHT"


class RollenSystemRecht(str, Enum):
    ROLLEN_VERWALTEN = "ROLLEN_VERWALTEN"
    PERSONEN_SOFORT_LOESCHEN = "PERSONEN_SOFORT_LOESCHEN"
    PERSONEN_VERWALTEN = "PERSONEN_VERWALTEN"
    SCHULEN_VERWALTEN = "SCHULEN_VERWALTEN"
    KLASSEN_VERWALTEN = "KLASSEN_VERWALTEN"
    SCHULTRAEGER_VERWALTEN = "SCHULTRAEGER_VERWALTEN"
    MIGRATION_DURCHFUEHREN = "MIGRATION_DURCHFUEHREN"
    PERSON_SYNCHRONISIEREN = "PERSON_SYNCHRONISIEREN"


class Rolle(AggregateRoot):
    """A role that can be assigned to persons at organisations."""

    name: str | None = None
    administered_by_schulstrukturknoten: str | None = None
    rollenart: RollenArt | None = None
    merkmale: list[RollenMerkmal] = Field(default_factory=list)
    systemrechte: list[RollenSystemRecht] = Field(default_factory=list)

    def has_systemrecht(self, recht: RollenSystemRecht) -> bool:
        return recht in self.systemrechte
