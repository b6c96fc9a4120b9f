"""Abstract base class for ShortURL data access objects (DAOs).

This class establishes a consistent contract for all ShortURL DAO implementations,
regardless of how the underlying record collection is persisted.

Responsibilities:
    - Provide an interface for inserting and retrieving ShortURLModel objects.
    - Guarantee shortcode uniqueness across the whole stored collection.
    - Standardize error handling across data store implementations.

Example:
    Typical usage with a record-store-backed implementation:

        >>> from localshortener.models import ShortURLModel
        >>> from localshortener.dao.record import ShortURLRecordDAO
        >>> from localshortener.dao.store import MemoryRecordStore

        >>> dao = ShortURLRecordDAO(MemoryRecordStore())
        >>> dao.insert(short_url)
        <ShortURLRecordDAO>

        >>> retrieved = dao.get('a1b2c3')
        >>> print(retrieved.original_url)
        https://example.com/blog/article-123
"""

from abc import ABC, abstractmethod

from localshortener.models import ShortURLModel


class ShortURLBaseDAO(ABC):
    """Interface for ShortURL data access objects (DAOs).

    Methods:
        insert(short_url: ShortURLModel) -> ShortURLBaseDAO:
            Insert a new ShortURLModel into the data store.
            Raises ShortcodeTakenError if the shortcode already exists.
            Raises DataStoreError on read or write failure.

        get(shortcode: str) -> ShortURLModel:
            Retrieve a ShortURLModel by shortcode, regardless of expiry.
            Raises ShortURLNotFoundError if the entry does not exist.
            Raises DataStoreError on read failure.

        exists(shortcode: str) -> bool:
            Check whether a shortcode is in use.
            Raises DataStoreError on read failure.

        all() -> list[ShortURLModel]:
            Return every stored ShortURLModel in insertion order.
            Raises DataStoreError on read failure.

    NOTE:
        - Records are never updated or deleted by the DAO. Expired records stay
          queryable; callers decide what expiry means for them.
    """

    @abstractmethod
    def insert(self, short_url: ShortURLModel) -> 'ShortURLBaseDAO':
        pass

    @abstractmethod
    def get(self, shortcode: str) -> ShortURLModel:
        pass

    @abstractmethod
    def exists(self, shortcode: str) -> bool:
        pass

    @abstractmethod
    def all(self) -> list[ShortURLModel]:
        pass
