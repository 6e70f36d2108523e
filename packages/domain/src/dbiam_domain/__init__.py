"""dbiam-domain: organisations, persons, roles and role assignments."""

from .organisation import Organisation, OrganisationScope, OrganisationService, OrganisationsTyp
from .person import Person, PersonScope, PersonService
from .personenkontext import (
    Personenkontext,
    PersonenkontexteUpdate,
    PersonenkontextScope,
    PersonenkontextService,
)
from .rolle import Rolle, RollenArt, RollenMerkmal, RollenSystemRecht, RolleScope, RolleService

__all__ = [
    "Organisation",
    "OrganisationScope",
    "OrganisationService",
    "OrganisationsTyp",
    "Person",
    "PersonScope",
    "PersonService",
    "Personenkontext",
    "PersonenkontexteUpdate",
    "PersonenkontextScope",
    "PersonenkontextService",
    "Rolle",
    "RolleScope",
    "RolleService",
    "RollenArt",
    "RollenMerkmal",
    "RollenSystemRecht",
]
