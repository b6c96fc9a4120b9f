"""JSON file record store.

All keys live in a single JSON document on disk (the local profile):

    {
        "localshortener:local:shortened_urls": {"schema": 1, "urls": [...]},
        "localshortener:local:url_clicks": {"schema": 1, "clicks": {...}},
        "localshortener:local:app_logs": [...]
    }

Writes go to a temporary file in the same directory which then atomically
replaces the document, so a crash never leaves a half-written store behind.

NOTE: locks returned by `lock()` are only valid within the current process.
      Several processes writing the same file may still lose updates.
"""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

from localshortener.types import JSONValue
from localshortener.dao.store.base import RecordStoreBase, LocalLockMixin
from localshortener.dao.exceptions import DataStoreError


class FileRecordStore(LocalLockMixin, RecordStoreBase):
    """Record store persisting every key into one JSON file.

    Attributes:
        path (Path):
            Location of the JSON document. Parent directories are created on first write.
    """

    def __init__(self, path: str | os.PathLike):
        super().__init__()
        self.path = Path(path)
        self._io_lock = threading.RLock()

    def _read(self) -> dict[str, Any]:
        try:
            with self.path.open('r', encoding='utf-8') as f:
                document = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            raise DataStoreError(f"Can't read record store at {self.path}.") from e

        if not isinstance(document, dict):
            raise DataStoreError(f'Corrupt record store at {self.path} (expected a JSON object).')
        return document

    def _write(self, document: dict[str, Any]) -> None:
        try:
            payload = json.dumps(document, indent=2)
        except (TypeError, ValueError) as e:
            raise DataStoreError(f"Can't serialize record store document for {self.path}.") from e

        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f'.{self.path.name}.', suffix='.tmp')
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise DataStoreError(f"Can't write record store at {self.path}.") from e

    def get(self, key: str) -> JSONValue | None:
        with self._io_lock:
            return self._read().get(key)

    def set(self, key: str, value: JSONValue) -> None:
        with self._io_lock:
            document = self._read()
            document[key] = value
            self._write(document)

    def delete(self, key: str) -> None:
        with self._io_lock:
            document = self._read()
            if document.pop(key, None) is not None:
                self._write(document)
