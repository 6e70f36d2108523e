"""In-memory repositories and a small school structure shared by domain tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
import pytest_asyncio

from dbiam_core.adapters.memory import InMemoryRepository
from dbiam_domain.organisation import Organisation, OrganisationsTyp
from dbiam_domain.person import Person
from dbiam_domain.personenkontext import Personenkontext
from dbiam_domain.rolle import Rolle, RollenArt


@dataclass
class Repos:
    organisation: InMemoryRepository[Organisation]
    person: InMemoryRepository[Person]
    rolle: InMemoryRepository[Rolle]
    personenkontext: InMemoryRepository[Personenkontext]


@dataclass
class Schulstruktur:
    schule: Organisation
    klasse: Organisation
    lehrkraft: Rolle
    schueler: Rolle
    admin: Rolle
    person: Person


@pytest.fixture
def repos() -> Repos:
    return Repos(
        organisation=InMemoryRepository(Organisation),
        person=InMemoryRepository(Person),
        rolle=InMemoryRepository(Rolle),
        personenkontext=InMemoryRepository(Personenkontext),
    )


@pytest_asyncio.fixture
async def struktur(repos: Repos) -> Schulstruktur:
    schule = await repos.organisation.save(
        Organisation(kennung="1234567", name="Carl-Orff-Schule", typ=OrganisationsTyp.SCHULE)
    )
    klasse = await repos.organisation.save(
        Organisation(name="1a", typ=OrganisationsTyp.KLASSE, administriert_von=schule.id)
    )
    lehrkraft = await repos.rolle.save(
        Rolle(
            name="Lehrkraft",
            rollenart=RollenArt.LEHR,
            administered_by_schulstrukturknoten=schule.id,
        )
    )
    schueler = await repos.rolle.save(
        Rolle(
            name="Schüler",
            rollenart=RollenArt.LERN,
            administered_by_schulstrukturknoten=schule.id,
        )
    )
    admin = await repos.rolle.save(
        Rolle(
            name="Schuladmin",
            rollenart=RollenArt.LEIT,
            administered_by_schulstrukturknoten=schule.id,
        )
    )
    person = await repos.person.save(Person(vorname="Max", familienname="Mustermann"))
    return Schulstruktur(schule, klasse, lehrkraft, schueler, admin, person)
