from .aggregate import PERSON_FIELD_RULES, Person
from .scope import PersonScope
from .service import PersonService

__all__ = ["PERSON_FIELD_RULES", "Person", "PersonScope", "PersonService"]
