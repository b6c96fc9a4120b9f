from pathlib import Path

from localshortener.types import AppConfig
from localshortener.dao.store.base import RecordStoreBase
from localshortener.dao.store.memory_store import MemoryRecordStore
from localshortener.dao.store.file_store import FileRecordStore
from localshortener.dao.store.redis_store import RedisRecordStore
from localshortener.exceptions import BadConfigurationError
from localshortener.utils.config import project_root


def create_record_store(config: AppConfig) -> RecordStoreBase:
    """Build the record store selected by `config['store']['backend']`.

    Relative file store paths are resolved against the project root.

    Raises:
        BadConfigurationError: for an unknown backend.
        DataStoreError: if the Redis backend is unreachable.
    """
    store_config = config['store']
    backend = store_config['backend']

    if backend == 'memory':
        return MemoryRecordStore()
    if backend == 'file':
        path = Path(store_config['path']).expanduser()
        if not path.is_absolute():
            path = project_root() / path
        return FileRecordStore(path)
    if backend == 'redis':
        redis_config = {f'redis_{k}': v for k, v in store_config['redis'].items()}
        return RedisRecordStore(**redis_config)

    raise BadConfigurationError(f'Unknown store backend {backend!r}.')
