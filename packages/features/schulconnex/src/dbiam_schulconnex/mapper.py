"""
Map domain errors and validation results to SchulConnex errors.

Only the error kind and the carried context are inspected.  Anything the
table does not know becomes a generic internal server error.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dbiam_core.primitives.exceptions import DomainErrorKind, InvalidAttributeError
from dbiam_core.validation.rules import is_date_constraint

from .models import SchulConnexError

if TYPE_CHECKING:
    from dbiam_core.validation.result import ValidationResult

logger = logging.getLogger("dbiam.schulconnex")

INTERNAL_SERVER_ERROR = SchulConnexError(
    status_code=500,
    subcode="00",
    title="Interner Serverfehler",
    description=(
        "Es ist ein interner Fehler aufgetreten. "
        "Der aufgetretene Fehler konnte nicht verarbeitet werden"
    ),
)

BAD_REQUEST = SchulConnexError(
    status_code=400,
    subcode="00",
    title="Fehlerhafte Anfrage",
    description="Die Anfrage ist fehlerhaft",
)

_BY_KIND: dict[DomainErrorKind, SchulConnexError] = {
    DomainErrorKind.NOT_FOUND: SchulConnexError(
        status_code=404,
        subcode="01",
        title="Angefragte Entität existiert nicht",
        description="Die angeforderte Entität existiert nicht",
    ),
    DomainErrorKind.ALREADY_EXISTS: SchulConnexError(
        status_code=400,
        subcode="00",
        title="Entität existiert bereits",
        description="Die Entität existiert bereits",
    ),
    DomainErrorKind.COULD_NOT_BE_CREATED: INTERNAL_SERVER_ERROR,
    DomainErrorKind.COULD_NOT_BE_UPDATED: INTERNAL_SERVER_ERROR,
    DomainErrorKind.COULD_NOT_BE_DELETED: INTERNAL_SERVER_ERROR,
    DomainErrorKind.MISMATCHED_REVISION: SchulConnexError(
        status_code=409,
        subcode="00",
        title="Konflikt mit dem aktuellen Zustand der Ressource",
        description="Die Entität wurde zwischenzeitlich geändert",
    ),
    DomainErrorKind.SPECIFICATION_VIOLATED: SchulConnexError(
        status_code=400,
        subcode="00",
        title="Spezifikation nicht erfüllt",
        description="Eine Spezifikation der Entität wurde nicht erfüllt",
    ),
}


def _for_attribute(field_path: str, constraint: str) -> SchulConnexError:
    if is_date_constraint(constraint):
        return SchulConnexError(
            status_code=400,
            subcode="09",
            title="Datumsattribut hat einen ungültigen Wert",
            description=f"Datumsformat von Attribut {field_path} ist ungültig",
        )
    return BAD_REQUEST


def map_domain_error(error: object) -> SchulConnexError:
    """Map any error value to a SchulConnex error; unknown errors map to 500."""
    if isinstance(error, InvalidAttributeError):
        return _for_attribute(error.field_path, error.constraint)
    kind = getattr(error, "kind", None)
    if isinstance(kind, DomainErrorKind) and kind in _BY_KIND:
        return _BY_KIND[kind]
    logger.debug("No SchulConnex mapping for %r", error)
    return INTERNAL_SERVER_ERROR


def map_validation_result(result: ValidationResult) -> SchulConnexError:
    """
    Map the first failure of *result* to a 400 SchulConnex error.

    A failed date constraint yields subcode ``09`` naming the full dotted
    path of the attribute; everything else, including an empty result,
    yields subcode ``00``.
    """
    logger.debug("Mapping validation result %s", result.errors)
    if result.is_valid:
        return BAD_REQUEST
    field_path, constraint = result.first_error()
    return _for_attribute(field_path, constraint)
