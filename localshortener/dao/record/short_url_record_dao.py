"""Data Access Object (DAO) implementation for managing shortened URLs in a record store

The whole URL collection lives under a single record store key. Every
operation reads the collection from the store; mutations re-read it, apply
the change and write the full collection back while holding the store's lock
for that key. Several DAO instances over the same store therefore always see
each other's writes and never overwrite them.

Classes:
    ShortURLRecordDAO:
        DAO for storing and retrieving ShortURLModel in a record store.

Example:
    >>> from localshortener.dao.store import MemoryRecordStore
    >>> from localshortener.dao.record import ShortURLRecordDAO

    >>> dao = ShortURLRecordDAO(MemoryRecordStore(), prefix='app:dev')
    >>> dao.insert(short_url)
    <ShortURLRecordDAO>

    >>> dao.get('abc123').original_url
    'https://example.com/page'
    >>> dao.exists('zzzz')
    False
"""

from beartype import beartype

from localshortener.models import ShortURLModel
from localshortener.dao.base import ShortURLBaseDAO
from localshortener.dao.record.mixins import RecordStoreMixin
from localshortener.dao.exceptions import DataStoreError, ShortcodeTakenError, ShortURLNotFoundError


class ShortURLRecordDAO(RecordStoreMixin, ShortURLBaseDAO):
    """Record-store-based Data Access Object (DAO) for short URL mappings

    Attributes (see RecordStoreMixin):
        store (RecordStoreBase):
            Record store holding the URL collection.
        keys (RecordKeySchema):
            Key schema helper for generating namespaced keys.
    """

    def _load(self) -> list[ShortURLModel]:
        key = self.keys.urls_key()
        raw_urls = self._unwrap(key, self.store.get(key), 'urls', list)
        try:
            return [ShortURLModel.from_dict(raw) for raw in raw_urls]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise DataStoreError(f"Corrupt short URL record under key '{key}'.") from e

    def _dump(self, urls: list[ShortURLModel]) -> None:
        self.store.set(self.keys.urls_key(), self._wrap('urls', [url.to_dict() for url in urls]))

    @beartype
    def insert(self, short_url: ShortURLModel) -> 'ShortURLRecordDAO':
        """Insert a short URL mapping into the record store

        Args:
            short_url (ShortURLModel):
                ShortURLModel instance representing the shortened URL mapping.

        Returns:
            ShortURLRecordDAO: self (for method chaining)

        Raises:
            ShortcodeTakenError:
                If a short URL with the same shortcode already exists.
            DataStoreError:
                If the record store can't be read or written.
        """
        with self.store.lock(self.keys.urls_key()):
            urls = self._load()
            if any(url.shortcode == short_url.shortcode for url in urls):
                raise ShortcodeTakenError(f"Shortcode '{short_url.shortcode}' is already in use.")

            urls.append(short_url)
            self._dump(urls)
        return self

    @beartype
    def get(self, shortcode: str) -> ShortURLModel:
        """Retrieve a stored short URL mapping by shortcode

        Expired mappings are returned like any other.

        Raises:
            ShortURLNotFoundError:
                If the short URL does not exist.
            DataStoreError:
                If the record store can't be read.
        """
        for url in self._load():
            if url.shortcode == shortcode:
                return url
        raise ShortURLNotFoundError(f"Short URL with code '{shortcode}' not found.")

    @beartype
    def exists(self, shortcode: str) -> bool:
        return any(url.shortcode == shortcode for url in self._load())

    def all(self) -> list[ShortURLModel]:
        return self._load()
