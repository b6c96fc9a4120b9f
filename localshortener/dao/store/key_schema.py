import functools
from collections.abc import Callable

from localshortener.constants import StoreKey


__all__ = ['RecordKeySchema']  # hide internal decorator prefix_key from imports


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RecordKeySchema:
    """Provide standardized record store keys for storing data models.

    An optional prefix can be provided to namespace all generated keys,
    e.g. "localshortener:local" or "localshortener:test".
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def urls_key(self) -> str:
        return StoreKey.URLS.value

    @prefix_key
    def clicks_key(self) -> str:
        return StoreKey.CLICKS.value

    @prefix_key
    def logs_key(self) -> str:
        return StoreKey.LOGS.value
