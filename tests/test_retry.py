import pytest

from datasources.exceptions import RateLimited
from datasources import retry as retry_module
from datasources.retry import retry


@pytest.mark.asyncio
async def test_retry_async_success_after_failure():
    calls = []

    @retry(attempts=3, delay=0.01, backoff=1, exceptions=(ValueError,))
    async def flaky(x):
        calls.append(x)
        if len(calls) < 2:
            raise ValueError("temporary")
        return x * 2

    result = await flaky(5)
    assert result == 10
    assert len(calls) == 2


def test_retry_sync_success_after_failure():
    calls = []

    @retry(attempts=4, delay=0.01, backoff=1, exceptions=(ValueError,))
    def flaky(x):
        calls.append(x)
        if len(calls) < 3:
            raise ValueError("oops")
        return x + 1

    result = flaky(7)
    assert result == 8
    assert len(calls) == 3


def test_retry_exhausted():
    @retry(attempts=2, delay=0.01, backoff=1, exceptions=(ValueError,))
    def always_fail():
        raise ValueError("nope")

    with pytest.raises(ValueError):
        always_fail()


def test_retry_ignores_other_exceptions():
    calls = []

    @retry(attempts=3, delay=0.01, exceptions=(ValueError,))
    def wrong_kind():
        calls.append(1)
        raise KeyError("no retry")

    with pytest.raises(KeyError):
        wrong_kind()
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_retry_honours_server_hint_and_cap(monkeypatch):
    waits = []

    async def fake_sleep(seconds):
        waits.append(seconds)

    monkeypatch.setattr(retry_module.asyncio, "sleep", fake_sleep)
    calls = []

    @retry(attempts=3, delay=1.0, backoff=2.0, max_delay=30.0, exceptions=(RateLimited,))
    async def limited():
        calls.append(1)
        if len(calls) == 1:
            raise RateLimited("slow down", retry_after=5.0)
        if len(calls) == 2:
            raise RateLimited("slow down", retry_after=3600.0)
        return "done"

    assert await limited() == "done"
    assert waits == [5.0, 30.0]
