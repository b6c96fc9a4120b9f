"""Abstract base class for click event data access objects (DAOs).

Click events are append-only and keyed by shortcode value. The DAO does not
check that the shortcode belongs to an existing or live short URL.

Example:
    >>> from localshortener.dao.record import ClickRecordDAO
    >>> dao = ClickRecordDAO(store)
    >>> dao.append('abc123', click)
    ClickEventModel(id='...', timestamp=..., source='direct', location='Unknown')
    >>> len(dao.for_shortcode('abc123'))
    1
"""

from abc import ABC, abstractmethod

from localshortener.models import ClickEventModel


class ClickBaseDAO(ABC):
    """Interface for click event data access objects (DAOs).

    Methods:
        append(shortcode: str, click: ClickEventModel) -> ClickEventModel:
            Append a click event under `shortcode`, creating its list if absent.
            Raises DataStoreError on read or write failure.

        all() -> dict[str, list[ClickEventModel]]:
            Return every shortcode's click events in insertion order.
            Raises DataStoreError on read failure.

        for_shortcode(shortcode: str) -> list[ClickEventModel]:
            Return click events recorded for one shortcode ([] if none).
            Raises DataStoreError on read failure.
    """

    @abstractmethod
    def append(self, shortcode: str, click: ClickEventModel) -> ClickEventModel:
        pass

    @abstractmethod
    def all(self) -> dict[str, list[ClickEventModel]]:
        pass

    @abstractmethod
    def for_shortcode(self, shortcode: str) -> list[ClickEventModel]:
        pass
