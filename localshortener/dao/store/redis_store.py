"""Redis record store.

Every logical key maps to one Redis string holding the JSON document. Locks
use redis-py's distributed `Lock`, so several processes sharing the same
Redis database serialize their read-modify-write sequences.

Example:
    >>> from localshortener.dao.store import RedisRecordStore
    >>> store = RedisRecordStore(redis_host='localhost', redis_db=2)
    >>> store.set('localshortener:local:url_clicks', {'schema': 1, 'clicks': {}})
    >>> store.get('localshortener:local:url_clicks')
    {'schema': 1, 'clicks': {}}
"""

import json
from collections.abc import Iterator
from contextlib import contextmanager

import redis

from localshortener.constants import Defaults
from localshortener.types import JSONValue
from localshortener.dao.store.base import RecordStoreBase
from localshortener.dao.store.helpers import handle_redis_connection_error
from localshortener.dao.exceptions import DataStoreError


class RedisRecordStore(RecordStoreBase):
    """Redis-based record store

    Attributes:
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        lock_timeout (float):
            Seconds after which a held lock expires, and the longest a caller waits to acquire one.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int = 6379,
        redis_db: int = 0,
        redis_username: str | None = None,
        redis_password: str | None = None,
        redis_client: redis.Redis | None = None,
        lock_timeout: float = Defaults.LOCK_TIMEOUT_SECONDS,
    ):
        """Connect to Redis, or reuse `redis_client` when one is given.

        Raises:
            DataStoreError: if Redis doesn't answer a PING.
        """
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                decode_responses=True,
                username=redis_username,
                password=redis_password,
            )

        self.redis = redis_client
        self.lock_timeout = lock_timeout
        self._healthcheck()

    @handle_redis_connection_error
    def _healthcheck(self) -> None:
        self.redis.ping()

    @handle_redis_connection_error
    def get(self, key: str) -> JSONValue | None:
        raw = self.redis.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise DataStoreError(f"Corrupt JSON payload under Redis key '{key}'.") from e

    @handle_redis_connection_error
    def set(self, key: str, value: JSONValue) -> None:
        try:
            payload = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise DataStoreError(f"Can't serialize value for key '{key}'.") from e
        self.redis.set(key, payload)

    @handle_redis_connection_error
    def delete(self, key: str) -> None:
        self.redis.delete(key)

    @contextmanager
    def lock(self, key: str) -> Iterator[None]:
        lock = self.redis.lock(f'{key}:lock', timeout=self.lock_timeout, blocking_timeout=self.lock_timeout)
        try:
            acquired = lock.acquire()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(f"Can't acquire Redis lock for key '{key}'.") from e
        if not acquired:
            raise DataStoreError(f"Timed out acquiring Redis lock for key '{key}'.")

        try:
            yield
        finally:
            try:
                lock.release()
            except redis.exceptions.LockError as e:
                # Lock expired while held: another writer may have interleaved its update.
                raise DataStoreError(f"Redis lock for key '{key}' expired before release.") from e
