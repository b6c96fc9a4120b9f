"""Data Access Object (DAO) implementation for click events in a record store

All click events live under one record store key as a mapping from
shortcode to its ordered list of events. Appends re-read the mapping and
write it back while holding the store's lock for that key.
"""

from beartype import beartype

from localshortener.models import ClickEventModel
from localshortener.dao.base import ClickBaseDAO
from localshortener.dao.record.mixins import RecordStoreMixin
from localshortener.dao.exceptions import DataStoreError


class ClickRecordDAO(RecordStoreMixin, ClickBaseDAO):
    def _load_raw(self) -> dict[str, list]:
        key = self.keys.clicks_key()
        raw_clicks = self._unwrap(key, self.store.get(key), 'clicks', dict)
        if not all(isinstance(events, list) for events in raw_clicks.values()):
            raise DataStoreError(f"Corrupt click events under key '{key}'.")
        return raw_clicks

    def _parse(self, raw_events: list) -> list[ClickEventModel]:
        try:
            return [ClickEventModel.from_dict(raw) for raw in raw_events]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DataStoreError(f"Corrupt click event under key '{self.keys.clicks_key()}'.") from e

    @beartype
    def append(self, shortcode: str, click: ClickEventModel) -> ClickEventModel:
        """Append a click event under `shortcode`

        The event list is created if absent. No check is made that the
        shortcode belongs to a stored short URL.

        Raises:
            DataStoreError:
                If the record store can't be read or written.
        """
        key = self.keys.clicks_key()
        with self.store.lock(key):
            raw_clicks = self._load_raw()
            raw_clicks.setdefault(shortcode, []).append(click.to_dict())
            self.store.set(key, self._wrap('clicks', raw_clicks))
        return click

    def all(self) -> dict[str, list[ClickEventModel]]:
        return {shortcode: self._parse(events) for shortcode, events in self._load_raw().items()}

    @beartype
    def for_shortcode(self, shortcode: str) -> list[ClickEventModel]:
        return self._parse(self._load_raw().get(shortcode, []))
