import logging
from unittest.mock import AsyncMock

import pytest

from dbiam_core.primitives.exceptions import (
    DomainErrorKind,
    MismatchedRevisionError,
    SpecificationViolatedError,
)
from dbiam_core.primitives.result import Err, Ok
from dbiam_specifications import BaseSpecification, SpecificationPipeline, validate


class Recorded(BaseSpecification[object]):
    entity_type = "Personenkontext"

    def __init__(self, rule_name: str, verdict: bool) -> None:
        self.rule_name = rule_name
        self.check = AsyncMock(return_value=verdict)

    async def is_satisfied_by(self, candidate: object) -> bool:
        return await self.check(candidate)


class Outdated(Recorded):
    def violation(self, candidate: object) -> MismatchedRevisionError:
        return MismatchedRevisionError(self.entity_type, "p-1")


@pytest.mark.asyncio
async def test_first_failure_wins_and_later_rules_are_skipped() -> None:
    r1 = Recorded("R1", True)
    r2 = Recorded("R2", False)
    r3 = Recorded("R3", False)

    result = await SpecificationPipeline([r1, r2, r3]).validate(object())

    assert isinstance(result, Err)
    assert isinstance(result.error, SpecificationViolatedError)
    assert result.error.rule_name == "R2"
    assert r1.check.await_count == 1
    assert r2.check.await_count == 1
    assert r3.check.await_count == 0


@pytest.mark.asyncio
async def test_all_satisfied_returns_ok_none() -> None:
    rules = [Recorded("R1", True), Recorded("R2", True)]
    result = await SpecificationPipeline(rules).validate(object())
    assert result == Ok(None)


@pytest.mark.asyncio
async def test_empty_pipeline_succeeds() -> None:
    assert (await SpecificationPipeline().validate(object())).ok


@pytest.mark.asyncio
async def test_rule_may_name_a_different_error_kind() -> None:
    result = await validate(object(), [Recorded("R1", True), Outdated("OUTDATED", False)])

    assert isinstance(result, Err)
    assert result.error.kind is DomainErrorKind.MISMATCHED_REVISION


@pytest.mark.asyncio
async def test_failure_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="dbiam.specifications")

    await SpecificationPipeline([Recorded("R9", False)]).validate(object())

    assert "R9" in caplog.text


@pytest.mark.asyncio
async def test_collaborator_errors_propagate() -> None:
    broken = Recorded("R1", True)
    broken.check.side_effect = RuntimeError("db down")

    with pytest.raises(RuntimeError, match="db down"):
        await SpecificationPipeline([broken]).validate(object())


def test_add_appends_in_order() -> None:
    pipeline = SpecificationPipeline([Recorded("R1", True)])
    pipeline.add(Recorded("R2", True)).add(Recorded("R3", True))

    assert [r.rule_name for r in pipeline.rules] == ["R1", "R2", "R3"]
    assert len(pipeline) == 3
