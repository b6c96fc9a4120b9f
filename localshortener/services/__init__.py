from localshortener.services.results import ShortenRequest, CreateResult, BatchResult
from localshortener.services.registry import ShortURLRegistry
from localshortener.services.recorder import ClickRecorder


__all__ = [
    'ShortenRequest',
    'CreateResult',
    'BatchResult',
    'ShortURLRegistry',
    'ClickRecorder',
]
