from dataclasses import dataclass
from datetime import datetime
from typing import Any

from localshortener.utils.helpers import to_iso8601, from_iso8601


@dataclass(frozen=True)
class ShortURLModel:
    """Represent a shortened URL mapping.

    Attributes:
        id (str):
            Opaque unique identifier derived from the creation time.
        original_url (str):
            The original long URL that the shortcode resolves to.
        shortcode (str):
            The unique short identifier representing the shortened URL.
        created_at (datetime):
            Creation time (UTC).
        expires_at (datetime):
            End of the validity window (UTC). Always later than `created_at`.
        clicks (int):
            Kept for compatibility with stored records. Always 0 at creation;
            click counts are derived from recorded click events.

    Example:
        >>> from datetime import datetime, timedelta, UTC
        >>> now = datetime.now(UTC)
        >>> url = ShortURLModel(
        ...     id='1760870400000-1a2b3c4d',
        ...     original_url='https://example.com/article/123',
        ...     shortcode='abc123',
        ...     created_at=now,
        ...     expires_at=now + timedelta(minutes=30),
        ... )
        >>> url.shortcode
        'abc123'
        >>> url.to_dict()['originalUrl']
        'https://example.com/article/123'
    """

    id: str
    original_url: str
    shortcode: str
    created_at: datetime
    expires_at: datetime
    clicks: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Serialize into the JSON layout kept in the record store."""
        return {
            'id': self.id,
            'originalUrl': self.original_url,
            'shortcode': self.shortcode,
            'createdAt': to_iso8601(self.created_at),
            'expiresAt': to_iso8601(self.expires_at),
            'clicks': self.clicks,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ShortURLModel':
        """Deserialize a record from its stored JSON layout.

        Raises:
            KeyError: if a required field is missing.
            ValueError: if a timestamp is not ISO-8601.
        """
        return cls(
            id=str(data['id']),
            original_url=data['originalUrl'],
            shortcode=data['shortcode'],
            created_at=from_iso8601(data['createdAt']),
            expires_at=from_iso8601(data['expiresAt']),
            clicks=int(data.get('clicks', 0)),
        )
