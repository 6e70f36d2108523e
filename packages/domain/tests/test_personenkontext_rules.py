from unittest.mock import AsyncMock

import pytest

from dbiam_domain.organisation import Organisation, OrganisationsTyp
from dbiam_domain.personenkontext import (
    OnlyTeachersAndLearnersAtClass,
    Personenkontext,
    SameRoleAtClassAsSchool,
)


def kontext(struktur, organisation, rolle) -> Personenkontext:
    return Personenkontext(
        person_id=struktur.person.id, organisation_id=organisation.id, rolle_id=rolle.id
    )


@pytest.fixture
def same_role(repos) -> SameRoleAtClassAsSchool:
    return SameRoleAtClassAsSchool(repos.organisation, repos.personenkontext, repos.rolle)


@pytest.fixture
def teachers_and_learners(repos) -> OnlyTeachersAndLearnersAtClass:
    return OnlyTeachersAndLearnersAtClass(repos.organisation, repos.rolle)


@pytest.mark.asyncio
async def test_same_role_ignores_non_klasse(same_role, struktur) -> None:
    assert await same_role.is_satisfied_by(
        kontext(struktur, struktur.schule, struktur.lehrkraft)
    )


@pytest.mark.asyncio
async def test_same_role_requires_role_at_schule(same_role, repos, struktur) -> None:
    at_klasse = kontext(struktur, struktur.klasse, struktur.lehrkraft)
    assert not await same_role.is_satisfied_by(at_klasse)

    await repos.personenkontext.save(kontext(struktur, struktur.schule, struktur.lehrkraft))
    assert await same_role.is_satisfied_by(at_klasse)


@pytest.mark.asyncio
async def test_same_role_different_role_at_schule(same_role, repos, struktur) -> None:
    await repos.personenkontext.save(kontext(struktur, struktur.schule, struktur.schueler))

    assert not await same_role.is_satisfied_by(
        kontext(struktur, struktur.klasse, struktur.lehrkraft)
    )


@pytest.mark.asyncio
async def test_same_role_unknown_organisation(same_role, struktur) -> None:
    candidate = Personenkontext(
        person_id=struktur.person.id, organisation_id="missing", rolle_id=struktur.lehrkraft.id
    )
    assert not await same_role.is_satisfied_by(candidate)


@pytest.mark.asyncio
async def test_same_role_klasse_without_parent(same_role, repos, struktur) -> None:
    orphan = await repos.organisation.save(
        Organisation(name="Waisenklasse", typ=OrganisationsTyp.KLASSE)
    )
    assert not await same_role.is_satisfied_by(kontext(struktur, orphan, struktur.lehrkraft))


@pytest.mark.asyncio
async def test_unresolvable_parent_is_not_satisfied_without_raising() -> None:
    klasse = Organisation(
        id="k-1", name="1a", typ=OrganisationsTyp.KLASSE, administriert_von="gone"
    )
    organisation_repo = AsyncMock()
    organisation_repo.get.side_effect = {"k-1": klasse}.get
    personenkontext_repo = AsyncMock()
    rolle_repo = AsyncMock()
    rule = SameRoleAtClassAsSchool(organisation_repo, personenkontext_repo, rolle_repo)

    satisfied = await rule.is_satisfied_by(
        Personenkontext(person_id="p-1", organisation_id="k-1", rolle_id="r-1")
    )

    assert satisfied is False
    assert organisation_repo.get.await_count == 2
    personenkontext_repo.execute_scope.assert_not_awaited()
    rolle_repo.get.assert_not_awaited()


@pytest.mark.asyncio
async def test_only_lehr_and_lern_at_klasse(teachers_and_learners, struktur) -> None:
    assert await teachers_and_learners.is_satisfied_by(
        kontext(struktur, struktur.klasse, struktur.schueler)
    )
    assert await teachers_and_learners.is_satisfied_by(
        kontext(struktur, struktur.klasse, struktur.lehrkraft)
    )
    assert not await teachers_and_learners.is_satisfied_by(
        kontext(struktur, struktur.klasse, struktur.admin)
    )


@pytest.mark.asyncio
async def test_any_role_outside_klasse(teachers_and_learners, struktur) -> None:
    assert await teachers_and_learners.is_satisfied_by(
        kontext(struktur, struktur.schule, struktur.admin)
    )


@pytest.mark.asyncio
async def test_unknown_role_at_klasse(teachers_and_learners, struktur) -> None:
    candidate = Personenkontext(
        person_id=struktur.person.id, organisation_id=struktur.klasse.id, rolle_id="missing"
    )
    assert not await teachers_and_learners.is_satisfied_by(candidate)
