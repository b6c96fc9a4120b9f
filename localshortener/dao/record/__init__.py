from localshortener.dao.record.mixins import RecordStoreMixin
from localshortener.dao.record.short_url_record_dao import ShortURLRecordDAO
from localshortener.dao.record.click_record_dao import ClickRecordDAO
from localshortener.dao.record.log_record_dao import LogRecordDAO


__all__ = [
    'RecordStoreMixin',
    'ShortURLRecordDAO',
    'ClickRecordDAO',
    'LogRecordDAO',
]
