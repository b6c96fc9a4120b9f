"""Click recorder

Appends click events under a shortcode. Recording is unconditional: the
recorder never checks whether the shortcode belongs to a stored, live short
URL. Callers which only want to count successful resolutions (such as the
redirect command) check the record first.

Store failures are logged and reported as None / {} / [] instead of raising.
"""

import logging

from localshortener.constants import Defaults
from localshortener.models import ClickEventModel
from localshortener.dao.base import ClickBaseDAO
from localshortener.dao.record import ClickRecordDAO
from localshortener.dao.store import RecordStoreBase
from localshortener.dao.exceptions import DataStoreError
from localshortener.utils.helpers import generate_id, utc_now


class ClickRecorder:
    def __init__(self, clicks: ClickBaseDAO, logger: logging.Logger | None = None):
        self.clicks = clicks
        self.logger = logger or logging.getLogger(__name__)

    @classmethod
    def from_store(cls, store: RecordStoreBase, prefix: str | None = None, **kwargs) -> 'ClickRecorder':
        return cls(ClickRecordDAO(store, prefix=prefix), **kwargs)

    def record_click(
        self,
        shortcode: str,
        source: str = Defaults.CLICK_SOURCE,
        location: str = Defaults.CLICK_LOCATION,
    ) -> str | None:
        """Record a click for a shortcode.

        Returns:
            str | None: id of the recorded click, or None if it couldn't be saved.
        """
        now = utc_now()
        click = ClickEventModel(id=generate_id(now), timestamp=now, source=source, location=location)

        try:
            self.clicks.append(shortcode, click)
        except DataStoreError as e:
            self.logger.error('Failed to record click', extra={'shortcode': shortcode, 'error': str(e)})
            return None

        self.logger.info('Click recorded', extra={'shortcode': shortcode, 'source': source, 'location': location})
        return click.id

    def get_clicks(self) -> dict[str, list[ClickEventModel]]:
        try:
            return self.clicks.all()
        except DataStoreError as e:
            self.logger.error('Failed to retrieve clicks from storage', extra={'error': str(e)})
            return {}

    def get_clicks_for(self, shortcode: str) -> list[ClickEventModel]:
        try:
            return self.clicks.for_shortcode(shortcode)
        except DataStoreError as e:
            self.logger.error('Failed to retrieve clicks from storage', extra={'shortcode': shortcode, 'error': str(e)})
            return []
