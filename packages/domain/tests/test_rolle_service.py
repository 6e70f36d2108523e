from unittest.mock import AsyncMock

import pytest

from dbiam_core.primitives.exceptions import DomainErrorKind, PersistenceError
from dbiam_core.primitives.result import Err, Ok
from dbiam_domain.rolle import Rolle, RollenArt, RollenMerkmal, RollenSystemRecht, RolleService


@pytest.fixture
def service(repos) -> RolleService:
    return RolleService(repos.rolle, repos.organisation)


@pytest.mark.asyncio
async def test_create_rolle(service, struktur) -> None:
    result = await service.create_rolle(
        Rolle(
            name="Vertretung",
            rollenart=RollenArt.LEHR,
            administered_by_schulstrukturknoten=struktur.schule.id,
            merkmale=[RollenMerkmal.BEFRISTUNG_PFLICHT],
            systemrechte=[RollenSystemRecht.KLASSEN_VERWALTEN],
        )
    )

    assert isinstance(result, Ok)
    assert result.value.has_systemrecht(RollenSystemRecht.KLASSEN_VERWALTEN)
    assert not result.value.has_systemrecht(RollenSystemRecht.ROLLEN_VERWALTEN)


@pytest.mark.asyncio
async def test_name_with_surrounding_space(service, struktur) -> None:
    result = await service.create_rolle(
        Rolle(name="Lehrer ", administered_by_schulstrukturknoten=struktur.schule.id)
    )

    assert isinstance(result, Err)
    assert result.error.rule_name == "NAME_MIT_LEERZEICHEN"


@pytest.mark.asyncio
async def test_unknown_schulstrukturknoten(service) -> None:
    result = await service.create_rolle(
        Rolle(name="Lehrer", administered_by_schulstrukturknoten="missing")
    )

    assert isinstance(result, Err)
    assert result.error.kind is DomainErrorKind.NOT_FOUND


@pytest.mark.asyncio
async def test_find_rollen_by_art(service, struktur) -> None:
    page = await service.find_rollen(rollenart=RollenArt.LERN)

    assert page.total == 1
    assert page.items[0].name == "Schüler"


@pytest.mark.asyncio
async def test_storage_failure_looking_up_knoten(repos) -> None:
    repos.organisation.get = AsyncMock(side_effect=PersistenceError("db down"))
    service = RolleService(repos.rolle, repos.organisation)

    result = await service.create_rolle(
        Rolle(name="Lehrkraft", rollenart=RollenArt.LEHR, administered_by_schulstrukturknoten="s-1")
    )

    assert isinstance(result, Err)
    assert result.error.kind is DomainErrorKind.COULD_NOT_BE_CREATED
