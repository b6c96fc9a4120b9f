"""Unit tests for logging utilities in logging.py

Test coverage includes:

1. JSON formatting
   - Ensures records render as one JSON object with timestamp, level, logger and message.
   - Ensures `extra` fields are attached and non-JSON values are stringified.
   - Ensures exceptions are rendered.

2. Record store mirroring
   - Ensures RecordStoreLogHandler appends LogEntryModel entries to the log sink.
   - Ensures sink failures are reported through handleError() instead of raising.

3. Logging initialization
   - Ensures initialize_logging() configures the root level and handlers.
"""

import json
import logging
import sys
from datetime import datetime, UTC
from unittest.mock import MagicMock

import pytest

from localshortener.models import LogEntryModel
from localshortener.dao.record import LogRecordDAO
from localshortener.utils.logging import JsonFormatter, RecordStoreLogHandler, initialize_logging


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def make_record():
    def _make_record(message='Short URL created successfully', level=logging.INFO, extra=None, exc_info=None):
        record = logging.LogRecord(
            name='localshortener.services.registry',
            level=level,
            pathname=__file__,
            lineno=1,
            msg=message,
            args=(),
            exc_info=exc_info,
        )
        record.created = datetime(2026, 10, 19, 12, 0, tzinfo=UTC).timestamp()
        for key, value in (extra or {}).items():
            setattr(record, key, value)
        return record

    return _make_record


@pytest.fixture
def restore_root_logger():
    """Undo initialize_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


# -------------------------------
# 1. JSON formatting
# -------------------------------


def test_json_formatter_base_fields(make_record):
    log = json.loads(JsonFormatter().format(make_record()))

    assert log == {
        'timestamp': '2026-10-19T12:00:00.000Z',
        'level': 'INFO',
        'logger': 'localshortener.services.registry',
        'message': 'Short URL created successfully',
    }


def test_json_formatter_attaches_extra(make_record):
    when = datetime(2026, 1, 1)
    log = json.loads(JsonFormatter().format(make_record(extra={'shortcode': 'abc123', 'count': 2, 'when': when})))

    assert log['shortcode'] == 'abc123'
    assert log['count'] == 2
    assert log['when'] == str(when)


def test_json_formatter_renders_exceptions(make_record):
    try:
        raise ValueError('boom')
    except ValueError:
        record = make_record(level=logging.ERROR, exc_info=sys.exc_info())

    log = json.loads(JsonFormatter().format(record))

    assert 'ValueError: boom' in log['exception']


# -------------------------------
# 2. Record store mirroring
# -------------------------------


def test_record_store_handler_appends_entries(make_record):
    sink = MagicMock()
    handler = RecordStoreLogHandler(sink)

    handler.emit(make_record(extra={'shortcode': 'abc123'}))

    sink.append.assert_called_once_with(
        LogEntryModel(
            timestamp='2026-10-19T12:00:00.000Z',
            level='INFO',
            logger='localshortener.services.registry',
            message='Short URL created successfully',
            data={'shortcode': 'abc123'},
        )
    )


def test_record_store_handler_reports_sink_failures(make_record, monkeypatch):
    sink = MagicMock()
    sink.append.side_effect = RuntimeError('disk full')
    handler = RecordStoreLogHandler(sink)
    handle_error = MagicMock()
    monkeypatch.setattr(handler, 'handleError', handle_error)

    record = make_record()
    handler.emit(record)

    handle_error.assert_called_once_with(record)


def test_record_store_handler_with_log_dao(store, make_record):
    dao = LogRecordDAO(store, prefix='testapp:test', max_entries=2)
    handler = RecordStoreLogHandler(dao)

    for index in range(3):
        handler.emit(make_record(message=f'entry {index}'))

    assert [entry.message for entry in dao.all()] == ['entry 1', 'entry 2']


# -------------------------------
# 3. Logging initialization
# -------------------------------


def test_initialize_logging_without_log_dao(restore_root_logger):
    initialize_logging('debug')

    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1
    assert isinstance(restore_root_logger.handlers[0].formatter, JsonFormatter)


def test_initialize_logging_mirrors_into_record_store(restore_root_logger):
    sink = MagicMock()

    initialize_logging('INFO', log_dao=sink)
    logging.getLogger('localshortener.tests').info('hello', extra={'shortcode': 'abc123'})

    mirror = [h for h in restore_root_logger.handlers if isinstance(h, RecordStoreLogHandler)]
    assert len(mirror) == 1
    assert mirror[0].log_dao is sink
    entry = sink.append.call_args.args[0]
    assert entry.message == 'hello'
    assert entry.data == {'shortcode': 'abc123'}
