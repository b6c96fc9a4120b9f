from localshortener.models.short_url_model import ShortURLModel
from localshortener.models.click_event_model import ClickEventModel
from localshortener.models.log_entry_model import LogEntryModel


__all__ = [
    'ShortURLModel',
    'ClickEventModel',
    'LogEntryModel',
]
