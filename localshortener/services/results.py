from dataclasses import dataclass, field
from typing import Any

from localshortener.exceptions import LocalShortenerError
from localshortener.models import ShortURLModel


# fmt: off
@dataclass(frozen=True)
class ShortenRequest:
    original_url: str                       # Long URL to shorten
    validity_minutes: Any = None            # Minutes until expiry; None means the configured default
    custom_shortcode: str | None = None     # Preferred shortcode; None or '' lets the registry generate one
# fmt: on


@dataclass(frozen=True)
class CreateResult:
    """Outcome of a single short URL creation.

    Exactly one of `record` and `error` is set.
    """

    record: ShortURLModel | None = None
    error: LocalShortenerError | None = None

    @property
    def success(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class BatchResult:
    """Outcome of shortening several URLs at once.

    Attributes:
        records (list[ShortURLModel]):
            Records created (and persisted) before processing stopped.
        error (LocalShortenerError | None):
            First error encountered, if any.
        failed_index (int | None):
            Position of the request that failed, if any.
    """

    records: list[ShortURLModel] = field(default_factory=list)
    error: LocalShortenerError | None = None
    failed_index: int | None = None

    @property
    def success(self) -> bool:
        return self.error is None
