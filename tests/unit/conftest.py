import logging
from unittest.mock import MagicMock

import pytest
import redis
from pytest import MonkeyPatch

from localshortener.constants import ENV
from localshortener.dao.store import MemoryRecordStore
from localshortener.services import ShortURLRegistry, ClickRecorder


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: MonkeyPatch) -> None:
    for group in (ENV.App, ENV.Store):
        for name in group:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_prefix() -> str:
    return 'testapp:test'


@pytest.fixture
def store() -> MemoryRecordStore:
    return MemoryRecordStore()


@pytest.fixture
def test_logger() -> logging.Logger:
    return logging.getLogger('localshortener.tests')


@pytest.fixture
def registry(store: MemoryRecordStore, app_prefix: str, test_logger: logging.Logger) -> ShortURLRegistry:
    return ShortURLRegistry.from_store(store, prefix=app_prefix, logger=test_logger)


@pytest.fixture
def recorder(store: MemoryRecordStore, app_prefix: str, test_logger: logging.Logger) -> ClickRecorder:
    return ClickRecorder.from_store(store, prefix=app_prefix, logger=test_logger)


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis client."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.get.return_value = None
    return client
