"""Per-rule error payloads for violated domain rules."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .models import DbiamSpecificationError

if TYPE_CHECKING:
    from dbiam_core.primitives.exceptions import SpecificationViolatedError

logger = logging.getLogger("dbiam.schulconnex")

_ORGANISATION = "Spezifikation von Organisation nicht erfüllt"
_PERSONENKONTEXT = "Spezifikation von Personenkontext nicht erfüllt"
_ROLLE = "Spezifikation von Rolle nicht erfüllt"
_UPDATE = "Aktualisierung der Personenkontexte nicht möglich"


def _entry(code: int, key: str, titel: str, beschreibung: str) -> DbiamSpecificationError:
    return DbiamSpecificationError(
        code=code, i18n_key=key, titel=titel, beschreibung=beschreibung
    )


SPECIFICATION_ERRORS: dict[str, DbiamSpecificationError] = {
    "KENNUNG_REQUIRED_FOR_SCHULE": _entry(
        400,
        "KENNUNG_REQUIRED_FOR_SCHULE",
        _ORGANISATION,
        "Eine Schule muss eine Kennung besitzen.",
    ),
    "NAME_REQUIRED_FOR_KLASSE": _entry(
        400,
        "NAME_REQUIRED_FOR_KLASSE",
        _ORGANISATION,
        "Eine Klasse muss einen Namen besitzen.",
    ),
    "KLASSE_NUR_VON_SCHULE_ADMINISTRIERT": _entry(
        400,
        "KLASSE_NUR_VON_SCHULE_ADMINISTRIERT",
        _ORGANISATION,
        "Eine Klasse kann nur von einer Schule administriert werden.",
    ),
    "KLASSENNAME_AN_SCHULE_EINDEUTIG": _entry(
        400,
        "KLASSENNAME_AN_SCHULE_EINDEUTIG",
        _ORGANISATION,
        "Der Name einer Klasse muss innerhalb der Schule eindeutig sein.",
    ),
    "NUR_LEHR_UND_LERN_AN_KLASSE": _entry(
        400,
        "NUR_LEHR_UND_LERN_AN_KLASSE",
        _PERSONENKONTEXT,
        "Nur Lehrer und Lernende können Klassen zugeordnet werden.",
    ),
    "GLEICHE_ROLLE_AN_KLASSE_WIE_SCHULE": _entry(
        400,
        "GLEICHE_ROLLE_AN_KLASSE_WIE_SCHULE",
        _PERSONENKONTEXT,
        "Die Rollenart der Person muss für die Klasse dieselbe sein wie an der "
        "zugehörigen Schule.",
    ),
    "PERSON_ID_MISMATCH": _entry(
        400,
        "PERSONENKONTEXTE_UPDATE_ERROR",
        _UPDATE,
        "Alle Personenkontexte müssen dieselbe Person betreffen.",
    ),
    "INVALID_PERSONENKONTEXT_COUNT": _entry(
        400,
        "PERSONENKONTEXTE_UPDATE_ERROR",
        _UPDATE,
        "Die Anzahl der Personenkontexte stimmt nicht mit dem gespeicherten Stand überein.",
    ),
    "NAME_MIT_LEERZEICHEN": _entry(
        400,
        "NAME_MIT_LEERZEICHEN",
        _ROLLE,
        "Der Name einer Rolle darf nicht mit Leerzeichen beginnen oder enden.",
    ),
}

# fallback per entity type when a rule has no entry of its own
_FAMILIES: dict[str, tuple[str, str]] = {
    "Organisation": ("ORGANISATION_SPECIFICATION_ERROR", _ORGANISATION),
    "Personenkontext": ("PERSONENKONTEXT_SPECIFICATION_ERROR", _PERSONENKONTEXT),
    "Rolle": ("ROLLE_SPECIFICATION_ERROR", _ROLLE),
}


def map_specification_error(error: SpecificationViolatedError) -> DbiamSpecificationError:
    known = SPECIFICATION_ERRORS.get(error.rule_name)
    if known is not None:
        return known
    logger.warning("No error entry for rule %s", error.rule_name)
    key, titel = _FAMILIES.get(
        error.entity_type, ("SPECIFICATION_ERROR", "Spezifikation nicht erfüllt")
    )
    return _entry(
        500,
        key,
        titel,
        f"Eine Spezifikation für {error.entity_type} wurde nicht erfüllt, "
        "der Fehler konnte jedoch nicht zugeordnet werden.",
    )
