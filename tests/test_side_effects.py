"""Канал best-effort эффектов и граница команд."""
import pytest

from src.core.messaging import SideEffectChannel
from src.core.result import Err, ErrorKind, Ok, OperationFailed, unwrap
from src.services.base import BaseService, command
from src.services.v1.issues import IssueService
from tests.conftest import activities_of, current, make_issue


@pytest.mark.asyncio
async def test_failed_effect_is_retried_then_reported(db_engine):
    attempts = []

    async def flaky(session):
        attempts.append(session)
        raise RuntimeError("storage offline")

    async def ok(session):
        return None

    channel = SideEffectChannel(bind=db_engine, max_attempts=3, retry_delay=0)
    channel.enqueue("flaky", flaky)
    channel.enqueue("ok", ok)
    report = await channel.dispatch()

    assert len(attempts) == 3
    assert report.failed == ["flaky"]
    assert report.delivered == ["ok"]
    assert not report.ok
    assert len(channel) == 0


@pytest.mark.asyncio
async def test_retrying_effect_does_not_hold_up_the_others(db_engine):
    events = []

    async def flaky(session):
        events.append("flaky")
        raise RuntimeError("notification table locked")

    async def ok(session):
        events.append("ok")

    channel = SideEffectChannel(bind=db_engine, max_attempts=3, retry_delay=0.05)
    channel.enqueue("flaky", flaky)
    channel.enqueue("ok", ok)
    report = await channel.dispatch()

    # второй получатель записан до повторов первого
    assert events[:2] == ["flaky", "ok"]
    assert events.count("flaky") == 3
    assert report.delivered == ["ok"]
    assert report.failed == ["flaky"]


@pytest.mark.asyncio
async def test_effect_recovers_on_retry(db_engine):
    attempts = []

    async def second_time_lucky(session):
        attempts.append(1)
        if len(attempts) < 2:
            raise RuntimeError("timeout")

    channel = SideEffectChannel(bind=db_engine, max_attempts=3, retry_delay=0)
    channel.enqueue("retry", second_time_lucky)
    assert (await channel.dispatch()).ok


@pytest.mark.asyncio
async def test_broken_cache_does_not_fail_the_update(db_session, project, owner):
    class BrokenCache:
        async def invalidate(self, paths):
            raise ConnectionError("redis down")

    issue = await make_issue(db_session, project, owner)
    service = IssueService(db_session, view_cache=BrokenCache())
    result = await service.update_issue(current(owner), issue.id, {"priority": "HIGH"})

    assert result.is_ok
    assert len(await activities_of(db_session, issue.id)) == 1


class _ExplodingService(BaseService):
    @command("test.explode")
    async def explode(self):
        raise KeyError("internal detail")


@pytest.mark.asyncio
async def test_unexpected_error_becomes_generic_internal(db_session):
    result = await _ExplodingService(db_session).explode()
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.INTERNAL
    assert "internal detail" not in result.error.message


def test_unwrap():
    assert unwrap(Ok(5)) == 5
    with pytest.raises(OperationFailed):
        unwrap(Err(_error()))
    with pytest.raises(TypeError):
        unwrap(5)


def _error():
    from src.core.result import OperationError

    return OperationError(kind=ErrorKind.CONFLICT, code="conflict", message="x")
