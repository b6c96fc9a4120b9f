from localshortener.dao.store.key_schema import RecordKeySchema
from localshortener.dao.store.base import RecordStoreBase
from localshortener.dao.store.memory_store import MemoryRecordStore
from localshortener.dao.store.file_store import FileRecordStore
from localshortener.dao.store.redis_store import RedisRecordStore
from localshortener.dao.store.factory import create_record_store


__all__ = [
    'RecordKeySchema',
    'RecordStoreBase',
    'MemoryRecordStore',
    'FileRecordStore',
    'RedisRecordStore',
    'create_record_store',
]
