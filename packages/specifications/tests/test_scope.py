import pytest
import pytest_asyncio

from dbiam_core.adapters.memory import InMemoryRepository
from dbiam_core.domain.aggregate import AggregateRoot
from dbiam_specifications import (
    FieldNotFoundError,
    InvalidPagingError,
    ScopeBase,
    ScopeOperator,
    ScopeOrder,
)


class Schule(AggregateRoot):
    kennung: str | None = None
    name: str | None = None
    typ: str | None = None


class SchuleScope(ScopeBase[Schule]):
    entity_cls = Schule


@pytest.fixture
def schule_repo() -> InMemoryRepository[Schule]:
    return InMemoryRepository(Schule)


@pytest_asyncio.fixture
async def filled_repo(schule_repo: InMemoryRepository[Schule]) -> InMemoryRepository[Schule]:
    for kennung, name, typ in [
        ("b", "Beta", "SCHULE"),
        ("c", "Gamma", "SCHULE"),
        ("a", "Alpha", "SCHULE"),
        ("k1", "1a", "KLASSE"),
        (None, "Ohne Kennung", "KLASSE"),
    ]:
        await schule_repo.save(Schule(kennung=kennung, name=name, typ=typ))
    return schule_repo


@pytest.mark.asyncio
async def test_unfiltered_scope_returns_everything(filled_repo) -> None:
    items, total = await SchuleScope().execute(filled_repo)
    assert total == 5
    assert len(items) == 5


@pytest.mark.asyncio
async def test_total_ignores_paging_window(filled_repo) -> None:
    scope = (
        SchuleScope()
        .find_by({"typ": "SCHULE"}, ScopeOperator.AND)
        .sort_by("kennung", ScopeOrder.ASC)
        .paged(offset=1, limit=1)
    )

    items, total = await scope.execute(filled_repo)

    assert total == 3
    assert [s.kennung for s in items] == ["b"]


@pytest.mark.asyncio
async def test_offset_past_end_returns_no_items(filled_repo) -> None:
    items, total = await SchuleScope().paged(offset=10, limit=5).execute(filled_repo)
    assert items == []
    assert total == 5


@pytest.mark.asyncio
async def test_zero_limit_still_counts(filled_repo) -> None:
    items, total = await SchuleScope().paged(limit=0).execute(filled_repo)
    assert items == []
    assert total == 5


@pytest.mark.asyncio
async def test_none_values_are_dropped(filled_repo) -> None:
    with_none = SchuleScope().find_by(
        {"kennung": None, "name": None, "typ": "KLASSE"}, ScopeOperator.AND
    )
    without = SchuleScope().find_by({"typ": "KLASSE"}, ScopeOperator.AND)

    assert with_none.filters == without.filters
    assert await with_none.execute(filled_repo) == await without.execute(filled_repo)


@pytest.mark.asyncio
async def test_all_none_group_adds_no_constraint(filled_repo) -> None:
    scope = SchuleScope().find_by({"kennung": None, "name": None}, ScopeOperator.OR)

    _, total = await scope.execute(filled_repo)

    assert scope.filters == ()
    assert total == 5


@pytest.mark.asyncio
async def test_or_group_matches_any(filled_repo) -> None:
    scope = SchuleScope().find_by({"kennung": "a", "name": "Gamma"}, ScopeOperator.OR)
    items, total = await scope.sort_by("kennung", ScopeOrder.ASC).execute(filled_repo)
    assert total == 2
    assert [s.kennung for s in items] == ["a", "c"]


@pytest.mark.asyncio
async def test_groups_are_anded(filled_repo) -> None:
    scope = (
        SchuleScope()
        .find_by({"kennung": "a", "name": "1a"}, ScopeOperator.OR)
        .find_by({"typ": "KLASSE"}, ScopeOperator.AND)
    )
    items, total = await scope.execute(filled_repo)
    assert total == 1
    assert items[0].name == "1a"


@pytest.mark.asyncio
async def test_ascending_sort(schule_repo) -> None:
    for kennung in ["b", "c", "a"]:
        await schule_repo.save(Schule(kennung=kennung))

    items, _ = await SchuleScope().sort_by("kennung", ScopeOrder.ASC).execute(schule_repo)

    assert [s.kennung for s in items] == ["a", "b", "c"]


@pytest.mark.asyncio
async def test_missing_values_last_ascending_first_descending(filled_repo) -> None:
    ascending, _ = await SchuleScope().sort_by("kennung", ScopeOrder.ASC).execute(
        filled_repo
    )
    descending, _ = await SchuleScope().sort_by("kennung", ScopeOrder.DESC).execute(
        filled_repo
    )

    assert [s.kennung for s in ascending] == ["a", "b", "c", "k1", None]
    assert [s.kennung for s in descending] == [None, "k1", "c", "b", "a"]


@pytest.mark.asyncio
async def test_later_sort_keys_break_ties(schule_repo) -> None:
    for typ, name in [("SCHULE", "b"), ("KLASSE", "z"), ("SCHULE", "a"), ("KLASSE", "y")]:
        await schule_repo.save(Schule(typ=typ, name=name))

    items, _ = await (
        SchuleScope()
        .sort_by("typ", ScopeOrder.DESC)
        .sort_by("name", ScopeOrder.ASC)
        .execute(schule_repo)
    )

    assert [(s.typ, s.name) for s in items] == [
        ("SCHULE", "a"),
        ("SCHULE", "b"),
        ("KLASSE", "y"),
        ("KLASSE", "z"),
    ]


@pytest.mark.asyncio
async def test_equal_keys_keep_insertion_order(schule_repo) -> None:
    for name in ["first", "second", "third"]:
        await schule_repo.save(Schule(typ="SCHULE", name=name))

    items, _ = await SchuleScope().sort_by("typ", ScopeOrder.ASC).execute(schule_repo)

    assert [s.name for s in items] == ["first", "second", "third"]


def test_unknown_field_suggests_close_matches() -> None:
    with pytest.raises(FieldNotFoundError) as exc_info:
        SchuleScope().find_by({"knenung": "a"}, ScopeOperator.AND)

    error = exc_info.value
    assert error.suggestions == ["kennung"]
    assert error.to_dict()["model"] == "Schule"
    assert "Did you mean" in str(error)


def test_unknown_sort_field_raises() -> None:
    with pytest.raises(FieldNotFoundError):
        SchuleScope().sort_by("nope", ScopeOrder.ASC)


@pytest.mark.parametrize(("offset", "limit"), [(-1, None), (None, -5)])
def test_negative_paging_raises(offset, limit) -> None:
    with pytest.raises(InvalidPagingError):
        SchuleScope().paged(offset=offset, limit=limit)
    with pytest.raises(ValueError):
        SchuleScope().paged(offset=offset, limit=limit)


def test_scope_exposes_read_only_view() -> None:
    scope = (
        SchuleScope()
        .find_by({"typ": "SCHULE"}, ScopeOperator.AND)
        .sort_by("name", ScopeOrder.DESC)
        .paged(2, 10)
    )

    assert len(scope.filters) == 1
    assert scope.filters[0].operator is ScopeOperator.AND
    assert scope.sort[0].field == "name"
    assert (scope.offset, scope.limit) == (2, 10)
    assert "SchuleScope" in repr(scope)
