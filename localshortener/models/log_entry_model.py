from dataclasses import dataclass, field
from typing import Any


# fmt: off
@dataclass(frozen=True)
class LogEntryModel:
    timestamp: str                                      # ISO-8601 UTC, e.g. 2026-10-19T12:00:00.000Z
    level: str                                          # INFO, WARNING, ERROR, ...
    logger: str                                         # Name of the emitting logger
    message: str                                        # Rendered log message
    data: dict[str, Any] = field(default_factory=dict)  # `extra` payload attached to the record
# fmt: on

    def to_dict(self) -> dict[str, Any]:
        return {
            'timestamp': self.timestamp,
            'level': self.level,
            'logger': self.logger,
            'message': self.message,
            'data': self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'LogEntryModel':
        return cls(
            timestamp=data['timestamp'],
            level=data['level'],
            logger=data.get('logger', ''),
            message=data['message'],
            data=dict(data.get('data') or {}),
        )
