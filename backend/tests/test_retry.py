# 시작 시 MongoDB ping 재시도 로직 테스트
import asyncio

import pytest
from pymongo.errors import ConnectionFailure, OperationFailure

from app.core.retry import create_db_retry_decorator


def _flaky(failures, exc):
    calls = {"n": 0}

    @create_db_retry_decorator(max_attempts=3, initial_wait=0, max_wait=0)
    async def ping():
        calls["n"] += 1
        if calls["n"] <= failures:
            raise exc
        return "pong"

    return ping, calls


def test_retries_until_success():
    ping, calls = _flaky(2, ConnectionFailure("not yet"))
    assert asyncio.run(ping()) == "pong"
    assert calls["n"] == 3


def test_gives_up_and_reraises():
    ping, calls = _flaky(5, ConnectionFailure("down"))
    with pytest.raises(ConnectionFailure):
        asyncio.run(ping())
    assert calls["n"] == 3


def test_other_errors_are_not_retried():
    ping, calls = _flaky(5, OperationFailure("auth failed"))
    with pytest.raises(OperationFailure):
        asyncio.run(ping())
    assert calls["n"] == 1
