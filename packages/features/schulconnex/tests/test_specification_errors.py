import logging

import pytest

from dbiam_core.primitives.exceptions import SpecificationViolatedError
from dbiam_schulconnex import SPECIFICATION_ERRORS, map_specification_error


@pytest.mark.parametrize("rule_name", sorted(SPECIFICATION_ERRORS))
def test_known_rules_map_to_their_entry(rule_name) -> None:
    mapped = map_specification_error(SpecificationViolatedError(rule_name, "Organisation"))

    assert mapped is SPECIFICATION_ERRORS[rule_name]
    assert mapped.code == 400


def test_update_rules_share_one_translation_key() -> None:
    keys = {
        SPECIFICATION_ERRORS[name].i18n_key
        for name in ("PERSON_ID_MISMATCH", "INVALID_PERSONENKONTEXT_COUNT")
    }
    assert keys == {"PERSONENKONTEXTE_UPDATE_ERROR"}


def test_unknown_rule_falls_back_to_entity_family(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="dbiam.schulconnex"):
        mapped = map_specification_error(
            SpecificationViolatedError("SOMETHING_NEW", "Personenkontext")
        )

    assert mapped.code == 500
    assert mapped.i18n_key == "PERSONENKONTEXT_SPECIFICATION_ERROR"
    assert "SOMETHING_NEW" in caplog.text


def test_unknown_entity_type_falls_back_to_generic_entry() -> None:
    mapped = map_specification_error(SpecificationViolatedError("X", "Gadget"))

    assert mapped.code == 500
    assert mapped.i18n_key == "SPECIFICATION_ERROR"
    assert mapped.to_payload()["i18nKey"] == "SPECIFICATION_ERROR"
