"""Short URL registry

The registry owns shortcode issuance and resolution: it validates user
input, generates or accepts a shortcode, computes the expiry and persists the
record through a ShortURL DAO.

Every public operation reports failures as values instead of raising:
    - create_short_url() returns a CreateResult carrying the error
      (InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError,
      ShortcodeTakenError, ShortcodeAllocationError or DataStoreError).
    - get_url() returns None for unknown shortcodes or store failures.
    - get_all_urls() returns [] on store failures.

All validation happens before anything is written, so a failed creation
never changes the record store.

Example:
    >>> from localshortener.dao.store import MemoryRecordStore
    >>> from localshortener.services import ShortURLRegistry

    >>> registry = ShortURLRegistry.from_store(MemoryRecordStore())
    >>> result = registry.create_short_url('https://example.com', validity_minutes=30)
    >>> result.success
    True
    >>> registry.get_url(result.record.shortcode).original_url
    'https://example.com'
    >>> registry.create_short_url('not a url').error
    InvalidUrlError("Invalid URL format: 'not a url'.")
"""

import logging
from collections.abc import Sequence
from datetime import datetime, timedelta, UTC
from typing import Any

from localshortener.constants import Defaults, Shortcode
from localshortener.models import ShortURLModel
from localshortener.dao.base import ShortURLBaseDAO
from localshortener.dao.record import ShortURLRecordDAO
from localshortener.dao.store import RecordStoreBase
from localshortener.dao.exceptions import DataStoreError, ShortURLNotFoundError, ShortcodeTakenError, ShortcodeAllocationError
from localshortener.exceptions import (
    LocalShortenerError,
    InvalidUrlError,
    InvalidValidityError,
    InvalidShortcodeFormatError,
    BatchTooLargeError,
)
from localshortener.services.results import ShortenRequest, CreateResult, BatchResult
from localshortener.utils.helpers import generate_id, utc_now
from localshortener.utils.shortener import allocate_shortcode, is_valid_url, is_valid_shortcode, parse_validity


class ShortURLRegistry:
    """Issue, validate and resolve shortcodes.

    Attributes:
        urls (ShortURLBaseDAO):
            DAO persisting short URL records.
        logger (logging.Logger):
            Logger receiving one structured event per operation.
        default_validity_minutes (float):
            Validity window used when a request doesn't specify one.
        shortcode_length (int):
            Length of generated shortcodes.
    """

    def __init__(
        self,
        urls: ShortURLBaseDAO,
        logger: logging.Logger | None = None,
        default_validity_minutes: float = Defaults.VALIDITY_MINUTES,
        shortcode_length: int = Shortcode.DEFAULT_LENGTH,
    ):
        self.urls = urls
        self.logger = logger or logging.getLogger(__name__)
        self.default_validity_minutes = default_validity_minutes
        self.shortcode_length = shortcode_length

    @classmethod
    def from_store(cls, store: RecordStoreBase, prefix: str | None = None, **kwargs) -> 'ShortURLRegistry':
        return cls(ShortURLRecordDAO(store, prefix=prefix), **kwargs)

    @staticmethod
    def is_valid_url(candidate: Any) -> bool:
        return is_valid_url(candidate)

    @staticmethod
    def is_expired(record: ShortURLModel, now: datetime | None = None) -> bool:
        return (now or datetime.now(UTC)) > record.expires_at

    def validate(self, request: ShortenRequest) -> tuple[float, str | None]:
        """Validate a shorten request without touching the record store.

        Returns:
            tuple[float, str | None]: normalized validity (minutes) and custom shortcode
            (None when a shortcode should be generated).

        Raises:
            InvalidUrlError, InvalidValidityError, InvalidShortcodeFormatError
        """
        if not is_valid_url(request.original_url):
            raise InvalidUrlError(f'Invalid URL format: {request.original_url!r}.')

        validity = parse_validity(request.validity_minutes, default=self.default_validity_minutes)

        custom_shortcode = request.custom_shortcode or None
        if custom_shortcode is not None and not is_valid_shortcode(custom_shortcode):
            raise InvalidShortcodeFormatError(
                'Shortcode must be at least 4 characters and contain only letters, numbers, hyphens, and underscores '
                f'(given value: {custom_shortcode!r}).'
            )

        return validity, custom_shortcode

    def _build(self, request: ShortenRequest, shortcode: str, validity: float) -> ShortURLModel:
        created_at = utc_now()
        try:
            expires_at = created_at + timedelta(minutes=validity)
        except OverflowError as e:
            raise InvalidValidityError(f'Validity is out of range (given value: {validity!r}).') from e
        if expires_at <= created_at:
            raise InvalidValidityError(f'Validity is too small to produce an expiry (given value: {validity!r}).')

        return ShortURLModel(
            id=generate_id(created_at),
            original_url=request.original_url,
            shortcode=shortcode,
            created_at=created_at,
            expires_at=expires_at,
        )

    def _insert_generated(self, request: ShortenRequest, validity: float) -> ShortURLModel:
        # allocate_shortcode() checks against the current store contents, but another
        # writer may claim the same code before insert() takes the lock.
        for _ in range(Shortcode.ATTEMPTS_PER_LENGTH):
            shortcode = allocate_shortcode(self.urls.exists, length=self.shortcode_length)
            short_url = self._build(request, shortcode, validity)
            try:
                self.urls.insert(short_url)
            except ShortcodeTakenError:
                self.logger.warning('Generated shortcode was claimed concurrently. Retrying.', extra={'shortcode': shortcode})
                continue
            return short_url

        raise ShortcodeAllocationError('Generated shortcodes kept colliding with concurrent writers.')

    def _create(self, request: ShortenRequest) -> ShortURLModel:
        validity, custom_shortcode = self.validate(request)

        if custom_shortcode is None:
            return self._insert_generated(request, validity)

        short_url = self._build(request, custom_shortcode, validity)
        self.urls.insert(short_url)
        return short_url

    def create_short_url(
        self,
        original_url: str,
        validity_minutes: Any = None,
        custom_shortcode: str | None = None,
    ) -> CreateResult:
        """Create and persist a short URL.

        Args:
            original_url (str):
                Absolute URL to shorten.
            validity_minutes (float | str | None):
                Minutes until expiry. Defaults to `default_validity_minutes`.
            custom_shortcode (str | None):
                Preferred shortcode matching [A-Za-z0-9_-]{4,}. Generated when omitted.

        Returns:
            CreateResult: the stored record, or the error which prevented creating it.
        """
        request = ShortenRequest(original_url=original_url, validity_minutes=validity_minutes, custom_shortcode=custom_shortcode)
        self.logger.info(
            'Creating short URL',
            extra={'original_url': original_url, 'validity_minutes': validity_minutes, 'custom_shortcode': custom_shortcode},
        )

        try:
            short_url = self._create(request)
        except DataStoreError as e:
            self.logger.error('Failed to save short URL to storage', extra={'original_url': original_url, 'error': str(e)})
            return CreateResult(error=e)
        except LocalShortenerError as e:
            self.logger.error(str(e), extra={'original_url': original_url, 'error_code': e.error_code})
            return CreateResult(error=e)

        self.logger.info('Short URL created successfully', extra={'shortcode': short_url.shortcode})
        return CreateResult(record=short_url)

    def shorten_many(self, requests: Sequence[ShortenRequest]) -> BatchResult:
        """Shorten several URLs at once (at most MAX_BATCH_SIZE).

        Every request is validated before anything is written; if one is
        invalid, nothing is stored. Records are then created in order and
        processing stops at the first failure. Records created before the
        failure stay stored.
        """
        if len(requests) > Defaults.MAX_BATCH_SIZE:
            error = BatchTooLargeError(f'At most {Defaults.MAX_BATCH_SIZE} URLs can be shortened at once (given: {len(requests)}).')
            self.logger.warning(str(error), extra={'count': len(requests)})
            return BatchResult(error=error)

        for index, request in enumerate(requests):
            try:
                self.validate(request)
            except LocalShortenerError as e:
                self.logger.warning('URL shortening failed validation', extra={'index': index, 'error_code': e.error_code})
                return BatchResult(error=e, failed_index=index)

        records = []
        for index, request in enumerate(requests):
            result = self.create_short_url(request.original_url, request.validity_minutes, request.custom_shortcode)
            if not result.success:
                return BatchResult(records=records, error=result.error, failed_index=index)
            records.append(result.record)

        return BatchResult(records=records)

    def get_url(self, shortcode: Any) -> ShortURLModel | None:
        """Look up a short URL by exact shortcode.

        Expired records are returned too; use is_expired() to check them.
        Returns None when the shortcode is unknown or the store can't be read.
        """
        if not isinstance(shortcode, str):
            self.logger.warning('URL not found for shortcode', extra={'shortcode': repr(shortcode)})
            return None

        try:
            short_url = self.urls.get(shortcode)
        except ShortURLNotFoundError:
            self.logger.warning('URL not found for shortcode', extra={'shortcode': shortcode})
            return None
        except DataStoreError as e:
            self.logger.error('Failed to retrieve URLs from storage', extra={'shortcode': shortcode, 'error': str(e)})
            return None

        self.logger.info('URL retrieved by shortcode', extra={'shortcode': shortcode})
        return short_url

    def get_all_urls(self) -> list[ShortURLModel]:
        try:
            urls = self.urls.all()
        except DataStoreError as e:
            self.logger.error('Failed to retrieve URLs from storage', extra={'error': str(e)})
            return []

        self.logger.info('Retrieved all URLs', extra={'count': len(urls)})
        return urls
