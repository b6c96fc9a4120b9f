"""Application-wide logging initialization

IMPORTANT: Call `initialize_logging()` once at program start (the CLI does)
before any other logging is done.

Logging format:
{
    "timestamp": "2026-10-19T12:00:00.000Z",
    "level": "INFO",
    "logger": "localshortener.services.registry",
    "message": "Short URL created successfully",
    "shortcode": "Xq3bT9"
}

Components never own a logger singleton. They receive a `logging.Logger` at
construction time and attach their payload through `extra=`. Mirroring recent
log entries into the record store is just another handler
(`RecordStoreLogHandler`), enabled by passing a log DAO to
`initialize_logging()`.
"""

import json
import logging
import logging.config
from datetime import datetime, UTC
from typing import Any, Protocol

from localshortener.models.log_entry_model import LogEntryModel


class LogSink(Protocol):
    def append(self, entry: LogEntryModel) -> None: ...


STANDARD_ATTRS = frozenset(
    {
        'args',
        'asctime',
        'created',
        'exc_info',
        'exc_text',
        'filename',
        'funcName',
        'levelname',
        'levelno',
        'lineno',
        'module',
        'msecs',
        'msg',
        'message',
        'name',
        'pathname',
        'process',
        'processName',
        'relativeCreated',
        'stack_info',
        'thread',
        'threadName',
        'taskName',
    }
)


def record_timestamp(record: logging.LogRecord) -> str:
    # fmt: off
    return datetime.fromtimestamp(record.created, tz=UTC) \
                   .isoformat(timespec='milliseconds') \
                   .replace('+00:00', 'Z')
    # fmt: on


def record_extras(record: logging.LogRecord) -> dict[str, Any]:
    """Return the `extra` fields attached to a LogRecord as JSON-safe values."""
    extras = {key: value for key, value in record.__dict__.items() if key not in STANDARD_ATTRS}
    return json.loads(json.dumps(extras, default=str))


class JsonFormatter(logging.Formatter):
    """JSON formatter that includes LogRecord extras"""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': record_timestamp(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        # Attach `extra` fields
        log.update(record_extras(record))
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        return json.dumps(log, default=str)


class RecordStoreLogHandler(logging.Handler):
    """Mirror log records into the record store.

    Each record becomes a LogEntryModel appended through the log sink
    (see `localshortener.dao.record.LogRecordDAO`), which keeps only the
    most recent entries.

    NOTE: the log sink must not log itself, otherwise every append
          would recursively produce another log record.
    """

    def __init__(self, log_dao: LogSink, level: int | str = logging.NOTSET):
        super().__init__(level=level)
        self.log_dao = log_dao

    def emit(self, record: logging.LogRecord) -> None:
        try:
            entry = LogEntryModel(
                timestamp=record_timestamp(record),
                level=record.levelname,
                logger=record.name,
                message=record.getMessage(),
                data=record_extras(record),
            )
            self.log_dao.append(entry)
        except Exception:
            self.handleError(record)


def initialize_logging(level: str = 'INFO', log_dao: LogSink | None = None) -> None:
    """Configure the root logger.

    JSON lines go to stderr (stdout is reserved for command output).

    Args:
        level (str):
            Root log level name. Defaults to 'INFO'.
        log_dao (LogSink | None):
            When given, recent log entries are also mirrored into the record store.
    """
    handlers: dict[str, Any] = {
        'stderr': {
            'class': 'logging.StreamHandler',
            'formatter': 'json',
            'stream': 'ext://sys.stderr',
        }
    }
    if log_dao is not None:
        handlers['record_store'] = {
            '()': RecordStoreLogHandler,
            'log_dao': log_dao,
        }

    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {
                'json': {
                    '()': JsonFormatter,
                }
            },
            'handlers': handlers,
            'root': {
                'level': level.upper(),
                'handlers': list(handlers),
            },
        }
    )
