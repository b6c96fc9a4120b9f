"""Bounded log entry storage backing RecordStoreLogHandler.

IMPORTANT: this DAO must never log. It is called from inside a logging
handler, so any log call here would recurse.
"""

from localshortener.constants import Defaults
from localshortener.models import LogEntryModel
from localshortener.dao.store import RecordStoreBase
from localshortener.dao.record.mixins import RecordStoreMixin
from localshortener.dao.exceptions import DataStoreError


class LogRecordDAO(RecordStoreMixin):
    """Keep the most recent `max_entries` log entries in the record store."""

    def __init__(self, store: RecordStoreBase, prefix: str | None = None, max_entries: int = Defaults.MAX_LOG_ENTRIES):
        if max_entries <= 0:
            raise ValueError(f'max_entries must be a positive integer (given value: {max_entries}).')
        super().__init__(store, prefix=prefix)
        self.max_entries = max_entries

    def _load_raw(self) -> list:
        key = self.keys.logs_key()
        raw_entries = self.store.get(key)
        if raw_entries is None:
            return []
        if not isinstance(raw_entries, list):
            raise DataStoreError(f"Corrupt log entries under key '{key}'.")
        return raw_entries

    def append(self, entry: LogEntryModel) -> None:
        key = self.keys.logs_key()
        with self.store.lock(key):
            raw_entries = self._load_raw()
            raw_entries.append(entry.to_dict())
            self.store.set(key, raw_entries[-self.max_entries :])

    def all(self) -> list[LogEntryModel]:
        try:
            return [LogEntryModel.from_dict(raw) for raw in self._load_raw()]
        except (KeyError, TypeError, AttributeError) as e:
            raise DataStoreError(f"Corrupt log entry under key '{self.keys.logs_key()}'.") from e

    def clear(self) -> None:
        self.store.delete(self.keys.logs_key())
