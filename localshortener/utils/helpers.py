"""Helper utilities shared by models, DAOs and commands.

Functions:
    to_iso8601(dt: datetime) -> str
        Render a datetime as ISO-8601 UTC with millisecond precision and a 'Z' suffix
    from_iso8601(value: str) -> datetime
        Parse an ISO-8601 timestamp into a timezone-aware UTC datetime
    utc_now() -> datetime
        Current UTC time truncated to the millisecond precision kept in the record store
    generate_id(now: datetime | None = None) -> str
        Generate an opaque identifier derived from the current time
    get_short_url(shortcode: str, base_url: str | None = None) -> str
        Get string representation of short URL for a given shortcode

Example:
    >>> from localshortener.utils.helpers import get_short_url
    >>> get_short_url('abc123', 'https://sho.rt/')
    'https://sho.rt/abc123'
    >>> get_short_url('abc123')
    '/abc123'
"""

import secrets
from datetime import datetime, UTC


def to_iso8601(dt: datetime) -> str:
    """Render a datetime as an ISO-8601 UTC string.

    Naive datetimes are assumed to already be in UTC.

    Example:
        >>> to_iso8601(datetime(2026, 10, 19, 12, 0, tzinfo=UTC))
        '2026-10-19T12:00:00.000Z'
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    # fmt: off
    return dt.astimezone(UTC) \
             .isoformat(timespec='milliseconds') \
             .replace('+00:00', 'Z')
    # fmt: on


def from_iso8601(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into a timezone-aware UTC datetime.

    Raises:
        ValueError: if `value` is not a valid ISO-8601 timestamp.
    """
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_now() -> datetime:
    now = datetime.now(UTC)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def generate_id(now: datetime | None = None) -> str:
    """Generate an opaque identifier derived from the current time.

    The epoch milliseconds keep identifiers roughly ordered by creation time.
    The random suffix keeps identifiers created within the same millisecond apart.

    Example:
        >>> generate_id(datetime(2026, 10, 19, tzinfo=UTC))  # doctest: +SKIP
        '1792368000000-9f86d081'
    """
    now = now or datetime.now(UTC)
    return f'{int(now.timestamp() * 1000)}-{secrets.token_hex(4)}'


def get_short_url(shortcode: str, base_url: str | None = None) -> str:
    """Get string representation of shortened URL

    Args:
        shortcode (str): shortcode
        base_url (str | None): public base URL of the resolving endpoint.
            When not configured, the bare '/<shortcode>' path is returned.

    Returns:
        str: short url string representation
    """
    return f'{(base_url or "").rstrip("/")}/{shortcode}'
