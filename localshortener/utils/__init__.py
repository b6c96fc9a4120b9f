from localshortener.utils.config import app_env, app_name, project_root, app_prefix, load_config
from localshortener.utils.helpers import to_iso8601, from_iso8601, utc_now, generate_id, get_short_url
from localshortener.utils.shortener import generate_shortcode, allocate_shortcode, is_valid_url, is_valid_shortcode, parse_validity
from localshortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'allocate_shortcode',
    'is_valid_url',
    'is_valid_shortcode',
    'parse_validity',
    'app_env',
    'app_name',
    'app_prefix',
    'project_root',
    'load_config',
    'to_iso8601',
    'from_iso8601',
    'utc_now',
    'generate_id',
    'get_short_url',
    'initialize_logging',
]
