from __future__ import annotations

from datetime import date

from dbiam_core.domain.aggregate import AggregateRoot
from dbiam_core.validation.rules import Constraint, FieldRule


class Person(AggregateRoot):
    """
    A natural person known to the IAM.

    ``referrer`` is the identifier the person carries in the upstream
    directory; it is unique when set.
    """

    referrer: str | None = None
    vorname: str | None = None
    familienname: str | None = None
    geburtsdatum: date | None = None
    is_information_blocked: bool = False


PERSON_FIELD_RULES = (
    FieldRule("vorname", Constraint.REQUIRED),
    FieldRule("vorname", Constraint.NOT_EMPTY),
    FieldRule("vorname", Constraint.MAX_LENGTH, 64),
    FieldRule("vorname", Constraint.NO_SURROUNDING_WHITESPACE),
    FieldRule("familienname", Constraint.REQUIRED),
    FieldRule("familienname", Constraint.NOT_EMPTY),
    FieldRule("familienname", Constraint.MAX_LENGTH, 64),
    FieldRule("familienname", Constraint.NO_SURROUNDING_WHITESPACE),
    FieldRule("referrer", Constraint.MAX_LENGTH, 255),
    FieldRule("geburtsdatum", Constraint.IS_DATE),
)
