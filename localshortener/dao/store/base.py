"""Abstract base class for record stores.

A record store is the synchronous key-value persistence collaborator shared
by every DAO. Values are JSON documents; each implementation decides how
they are serialized and where they live.

Responsibilities:
    - Read and write whole JSON documents under string keys.
    - Provide a per-key lock so DAOs can run read-modify-write sequences
      without losing concurrent updates.
    - Convert backend-specific failures into DataStoreError.

Example:
    Typical usage with a store implementation:

        >>> from localshortener.dao.store import MemoryRecordStore
        >>> store = MemoryRecordStore()
        >>> with store.lock('shortened_urls'):
        ...     urls = store.get('shortened_urls') or []
        ...     store.set('shortened_urls', urls + [{'shortcode': 'abc123'}])
        >>> store.get('shortened_urls')
        [{'shortcode': 'abc123'}]
"""

import threading
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from localshortener.types import JSONValue


class RecordStoreBase(ABC):
    """Interface for record stores.

    Methods:
        get(key: str) -> JSONValue | None:
            Return the JSON document stored under `key`, or None if absent.
            Raises DataStoreError on read failure or corrupt payloads.

        set(key: str, value: JSONValue) -> None:
            Replace the JSON document stored under `key`.
            Raises DataStoreError on write or serialization failure.

        delete(key: str) -> None:
            Remove `key`. Removing an absent key is a no-op.
            Raises DataStoreError on write failure.

        lock(key: str) -> AbstractContextManager:
            Return a context manager guarding read-modify-write sequences on `key`.
    """

    @abstractmethod
    def get(self, key: str) -> JSONValue | None:
        pass

    @abstractmethod
    def set(self, key: str, value: JSONValue) -> None:
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        pass

    @abstractmethod
    def lock(self, key: str) -> AbstractContextManager:
        pass


class LocalLockMixin:
    """Per-key reentrant locks valid within the current process."""

    def __init__(self):
        self._locks: dict[str, threading.RLock] = {}
        self._locks_guard = threading.Lock()

    def lock(self, key: str) -> AbstractContextManager:
        with self._locks_guard:
            return self._locks.setdefault(key, threading.RLock())
