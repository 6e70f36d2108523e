from .aggregate import ORGANISATION_FIELD_RULES, Organisation, OrganisationsTyp
from .rules import (
    ClassAdministeredBySchool,
    ClassNameUniqueAtSchool,
    IdentifierRequiredForSchool,
    NameRequiredForClass,
    organisation_rules,
)
from .scope import OrganisationScope
from .service import OrganisationService

__all__ = [
    "ORGANISATION_FIELD_RULES",
    "ClassAdministeredBySchool",
    "ClassNameUniqueAtSchool",
    "IdentifierRequiredForSchool",
    "NameRequiredForClass",
    "Organisation",
    "OrganisationScope",
    "OrganisationService",
    "OrganisationsTyp",
    "organisation_rules",
]
