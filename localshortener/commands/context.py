from dataclasses import dataclass

from localshortener.types import AppConfig
from localshortener.dao.store import RecordStoreBase, create_record_store
from localshortener.dao.record import LogRecordDAO
from localshortener.services import ShortURLRegistry, ClickRecorder
from localshortener.utils.config import app_prefix


@dataclass
class CommandContext:
    """Everything a command handler needs, built once per process.

    Registry, recorder and log DAO share one record store. Nothing here is a
    module-level singleton; tests build their own contexts.
    """

    config: AppConfig
    store: RecordStoreBase
    registry: ShortURLRegistry
    recorder: ClickRecorder
    logs: LogRecordDAO

    @property
    def base_url(self) -> str | None:
        return self.config['shortener']['base_url']

    @classmethod
    def from_config(cls, config: AppConfig, store: RecordStoreBase | None = None) -> 'CommandContext':
        """Build a context from configuration.

        Raises:
            DataStoreError: if the configured record store is unreachable.
        """
        store = store or create_record_store(config)
        prefix = app_prefix()
        shortener_config = config['shortener']

        return cls(
            config=config,
            store=store,
            registry=ShortURLRegistry.from_store(
                store,
                prefix=prefix,
                default_validity_minutes=shortener_config['default_validity_minutes'],
                shortcode_length=shortener_config['shortcode_length'],
            ),
            recorder=ClickRecorder.from_store(store, prefix=prefix),
            logs=LogRecordDAO(store, prefix=prefix, max_entries=config['logging']['max_entries']),
        )
