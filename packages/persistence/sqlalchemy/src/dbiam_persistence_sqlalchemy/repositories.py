"""Repositories for the domain aggregates bound to one unit of work."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dbiam_domain.organisation.aggregate import Organisation
from dbiam_domain.person.aggregate import Person
from dbiam_domain.personenkontext.aggregate import Personenkontext
from dbiam_domain.rolle.aggregate import Rolle

from .core.repository import SQLAlchemyRepository
from .tables import OrganisationModel, PersonenkontextModel, PersonModel, RolleModel

if TYPE_CHECKING:
    from .core.uow import SQLAlchemyUnitOfWork


@dataclass(frozen=True)
class Repositories:
    organisation: SQLAlchemyRepository[Organisation]
    person: SQLAlchemyRepository[Person]
    rolle: SQLAlchemyRepository[Rolle]
    personenkontext: SQLAlchemyRepository[Personenkontext]


def build_repositories(uow: SQLAlchemyUnitOfWork) -> Repositories:
    return Repositories(
        organisation=SQLAlchemyRepository(Organisation, OrganisationModel, uow),
        person=SQLAlchemyRepository(Person, PersonModel, uow),
        rolle=SQLAlchemyRepository(Rolle, RolleModel, uow),
        personenkontext=SQLAlchemyRepository(
            Personenkontext, PersonenkontextModel, uow
        ),
    )
