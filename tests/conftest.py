"""
Test Configuration Module
"""

import fnmatch
import time
from typing import AsyncGenerator, Callable, Optional

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from kv_gateway.api.deps import get_kv_repo
from kv_gateway.common.errors import StoreError
from kv_gateway.config import get_settings
from kv_gateway.main import app
from kv_gateway.repositories.kv_store_repo import KeyValueRepository


class InMemoryKeyValueRepository(KeyValueRepository):
    """
    In-memory repository double

    Matches keys with fnmatch (close enough to Redis glob for tests) and
    expires keys against an injectable clock. Setting `fail_on` makes the
    given key raise StoreError on any write or delete.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self.data: dict[str, str] = {}
        self.expires_at: dict[str, float] = {}
        self.calls: list[tuple] = []
        self.fail_on: Optional[str] = None

    def _purge(self) -> None:
        now = self.clock()
        for key, deadline in list(self.expires_at.items()):
            if deadline <= now:
                self.data.pop(key, None)
                del self.expires_at[key]

    def _check_failure(self, key: str) -> None:
        if self.fail_on is not None and key == self.fail_on:
            raise StoreError(message=f"simulated failure for {key}")

    def get(self, key: str) -> Optional[str]:
        self._purge()
        return self.data.get(key)

    async def keys(self, pattern: str) -> list[str]:
        self._purge()
        self.calls.append(("keys", pattern))
        return [key for key in self.data if fnmatch.fnmatchcase(key, pattern)]

    async def delete(self, key: str) -> int:
        self._purge()
        self.calls.append(("delete", key))
        self._check_failure(key)
        self.expires_at.pop(key, None)
        return 1 if self.data.pop(key, None) is not None else 0

    async def set(self, key: str, value: str) -> str:
        self.calls.append(("set", key, value))
        self._check_failure(key)
        self.data[key] = value
        self.expires_at.pop(key, None)
        return "OK"

    async def set_with_expiration(self, key, value, expiration) -> str:
        self.calls.append(("setex", key, value, expiration))
        self._check_failure(key)
        if isinstance(expiration, bool) or not isinstance(expiration, int):
            raise StoreError(message="ERR value is not an integer or out of range")
        if expiration <= 0:
            raise StoreError(message="ERR invalid expire time in 'setex' command")
        self.data[key] = value
        self.expires_at[key] = self.clock() + expiration
        return "OK"


class FakeClock:
    """Manually advanced clock"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def memory_repo(clock) -> InMemoryKeyValueRepository:
    return InMemoryKeyValueRepository(clock=clock)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def client(memory_repo) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with the Redis repository replaced by memory_repo"""
    app.dependency_overrides[get_kv_repo] = lambda: memory_repo

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides = {}
