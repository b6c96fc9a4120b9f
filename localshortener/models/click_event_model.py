from dataclasses import dataclass
from datetime import datetime
from typing import Any

from localshortener.constants import Defaults
from localshortener.utils.helpers import to_iso8601, from_iso8601


# fmt: off
@dataclass(frozen=True)
class ClickEventModel:
    id: str                                     # Opaque click identifier
    timestamp: datetime                         # When the short URL was resolved (UTC)
    source: str = Defaults.CLICK_SOURCE         # Free-form referrer/source label
    location: str = Defaults.CLICK_LOCATION     # Free-form geographic label
# fmt: on

    def to_dict(self) -> dict[str, Any]:
        return {
            'id': self.id,
            'timestamp': to_iso8601(self.timestamp),
            'source': self.source,
            'location': self.location,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'ClickEventModel':
        return cls(
            id=str(data['id']),
            timestamp=from_iso8601(data['timestamp']),
            source=data.get('source', Defaults.CLICK_SOURCE),
            location=data.get('location', Defaults.CLICK_LOCATION),
        )
