from datetime import date

import pytest
from pydantic import BaseModel

from dbiam_core.validation import (
    Constraint,
    FieldRule,
    PydanticValidator,
    ValidationResult,
    validate_fields,
)
from dbiam_core.validation.rules import is_date_constraint, resolve_path


class Geburt(BaseModel):
    datum: date | None = None
    ort: str | None = None


class PersonInput(BaseModel):
    vorname: str | None = None
    familienname: str | None = None
    geburt: Geburt | None = None


RULES = (
    FieldRule("familienname", Constraint.REQUIRED),
    FieldRule("familienname", Constraint.MAX_LENGTH, 5),
    FieldRule("vorname", Constraint.NO_SURROUNDING_WHITESPACE),
    FieldRule("geburt.ort", Constraint.PATTERN, r"[A-Z][a-z]+"),
)


def test_valid_candidate_passes_all_rules() -> None:
    person = PersonInput(vorname="Max", familienname="Muster", geburt=Geburt(ort="Kiel"))
    result = validate_fields(person, RULES[:1] + RULES[2:])
    assert result.is_valid
    assert bool(result) is True


def test_failures_are_collected_per_path() -> None:
    person = PersonInput(vorname=" Max", familienname="Mustermann", geburt=Geburt(ort="kiel"))

    result = validate_fields(person, RULES)

    assert result.errors == {
        "familienname": ["max_length"],
        "vorname": ["no_surrounding_whitespace"],
        "geburt.ort": ["pattern"],
    }


def test_missing_values_only_fail_required() -> None:
    result = validate_fields(PersonInput(), RULES)
    assert result.errors == {"familienname": ["required"]}


def test_is_date_accepts_iso_strings() -> None:
    rules = (FieldRule("geburtsdatum", Constraint.IS_DATE),)
    assert validate_fields({"geburtsdatum": "2010-02-28"}, rules).is_valid
    assert not validate_fields({"geburtsdatum": "28.02.2010"}, rules).is_valid


def test_resolve_path_over_nested_mappings_and_objects() -> None:
    data = {"geburt": Geburt(ort="Kiel")}
    assert resolve_path(data, "geburt.ort") == "Kiel"
    assert resolve_path(data, "geburt.datum") is None
    assert resolve_path(data, "tod.datum") is None


def test_merge_combines_errors() -> None:
    first = ValidationResult.failure({"a": ["required"]})
    second = ValidationResult.failure({"a": ["max_length"], "b": ["pattern"]})

    merged = first.merge(second)

    assert merged.errors == {"a": ["required", "max_length"], "b": ["pattern"]}
    assert first.errors == {"a": ["required"]}


def test_first_error_on_valid_result_raises() -> None:
    with pytest.raises(ValueError, match="no errors"):
        ValidationResult.success().first_error()


def test_pydantic_validator_reports_nested_date_path() -> None:
    validator = PydanticValidator(PersonInput)

    result = validator.validate({"vorname": "Max", "geburt": {"datum": "kein-datum"}})

    path, constraint = result.first_error()
    assert path == "geburt.datum"
    assert is_date_constraint(constraint)


def test_pydantic_validator_success() -> None:
    result = PydanticValidator(PersonInput).validate({"geburt": {"datum": "2001-01-01"}})
    assert result.is_valid
