"""In-memory record store.

Values are kept as serialized JSON text (mirroring a browser's local storage),
so callers always receive fresh copies and unserializable values fail on write.
Useful for tests and throwaway sessions; nothing survives the process.
"""

import json

from localshortener.types import JSONValue
from localshortener.dao.store.base import RecordStoreBase, LocalLockMixin
from localshortener.dao.exceptions import DataStoreError


class MemoryRecordStore(LocalLockMixin, RecordStoreBase):
    def __init__(self):
        super().__init__()
        self._data: dict[str, str] = {}

    def get(self, key: str) -> JSONValue | None:
        raw = self._data.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: JSONValue) -> None:
        try:
            self._data[key] = json.dumps(value)
        except (TypeError, ValueError) as e:
            raise DataStoreError(f"Can't serialize value for key '{key}'.") from e

    def delete(self, key: str) -> None:
        self._data.pop(key, None)
