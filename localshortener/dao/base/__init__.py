from localshortener.dao.base.short_url_base_dao import ShortURLBaseDAO
from localshortener.dao.base.click_base_dao import ClickBaseDAO


__all__ = [
    'ShortURLBaseDAO',
    'ClickBaseDAO',
]
