"""Record store mixin shared by every store-backed DAO.

Responsibilities:
    - Hold the record store and its key schema
    - Wrap and unwrap versioned JSON envelopes

Versioned envelopes look like `{"schema": 1, "<field>": <payload>}`. Payloads
written without an envelope (a bare list or mapping) are read as schema 1.
"""

from typing import Any

from localshortener.constants import SCHEMA_VERSION
from localshortener.types import JSONValue
from localshortener.dao.store import RecordStoreBase, RecordKeySchema
from localshortener.dao.exceptions import DataStoreError


class RecordStoreMixin:
    """Mixin record store access for store-backed DAOs.

    Attributes:
        store (RecordStoreBase):
            Record store holding the DAO's JSON documents.

        keys (RecordKeySchema):
            Helper class for generating namespaced record store keys.
    """

    def __init__(self, store: RecordStoreBase, prefix: str | None = None):
        self.store = store
        self.keys = RecordKeySchema(prefix=prefix)

    def _unwrap(self, key: str, payload: JSONValue | None, field: str, legacy_type: type) -> Any:
        if payload is None:
            return legacy_type()
        if isinstance(payload, legacy_type):
            return payload
        if not isinstance(payload, dict) or field not in payload:
            raise DataStoreError(f"Corrupt payload under key '{key}' (expected a '{field}' envelope).")
        if payload.get('schema') != SCHEMA_VERSION:
            raise DataStoreError(f"Unsupported schema {payload.get('schema')!r} under key '{key}' (expected {SCHEMA_VERSION}).")
        if not isinstance(payload[field], legacy_type):
            raise DataStoreError(f"Corrupt payload under key '{key}' ('{field}' must be a {legacy_type.__name__}).")
        return payload[field]

    @staticmethod
    def _wrap(field: str, payload: Any) -> dict[str, Any]:
        return {'schema': SCHEMA_VERSION, field: payload}
