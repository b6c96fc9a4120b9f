import string
from enum import StrEnum


class Shortcode:
    """Shortcode generation and validation parameters."""

    # 26 lowercase + 26 uppercase + 10 digits
    ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
    DEFAULT_LENGTH = 6
    # Custom shortcodes: letters, digits, hyphens and underscores, at least 4 characters
    CUSTOM_PATTERN = r'[A-Za-z0-9_-]{4,}'
    ATTEMPTS_PER_LENGTH = 10
    MAX_WIDENINGS = 4


class Defaults:
    """Default values for short URLs, clicks and log mirroring."""

    VALIDITY_MINUTES = 30
    CLICK_SOURCE = 'direct'
    CLICK_LOCATION = 'Unknown'
    MAX_BATCH_SIZE = 5  # Maximum URLs shortened in a single request
    MAX_LOG_ENTRIES = 100  # Log entries mirrored into the record store
    STORE_BACKEND = 'file'
    STORE_PATH = '.localshortener/store.json'
    LOCK_TIMEOUT_SECONDS = 5


class StoreKey(StrEnum):
    """Logical record store keys (before prefixing)."""

    URLS = 'shortened_urls'
    CLICKS = 'url_clicks'
    LOGS = 'app_logs'


# Version of the JSON envelope written under StoreKey.URLS and StoreKey.CLICKS
SCHEMA_VERSION = 1


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        PROJECT_ROOT = 'PROJECT_ROOT'
        CONFIG_DIR = 'SHORTENER_CONFIG_DIR'
        BASE_URL = 'SHORTENER_BASE_URL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Store(StrEnum):
        BACKEND = 'STORE_BACKEND'
        PATH = 'STORE_PATH'
        REDIS_URL = 'REDIS_URL'
