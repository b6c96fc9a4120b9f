"""Utility functions for application configuration management.

Configuration is stored as one YAML document per application environment
(`APP_ENV`) under the project's `config/` directory:

    config/
    ├── local.yaml
    └── test.yaml

The YAML document follows this structure (every key is optional):

    store:
      backend: file                 # memory | file | redis
      path: .localshortener/store.json
      redis:
        host: localhost
        port: 6379
        db: 0
    shortener:
      base_url: https://sho.rt      # omit to render short URLs as '/<code>'
      default_validity_minutes: 30
      shortcode_length: 6
    logging:
      level: INFO
      max_entries: 100              # log entries mirrored into the record store

Missing files fall back to built-in defaults. Selected values can be
overridden with environment variables (see `localshortener.constants.ENV`).

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return record store key prefix, or None if `APP_NAME` is not set.

    project_root() -> Path
        Return the project root directory, using `PROJECT_ROOT` when available.

    load_config(env: str | None = None) -> dict
        Load, override and validate the configuration for an environment.

Example:
    >>> from localshortener.utils.config import load_config
    >>> config = load_config()
    >>> config['store']['backend']
    'file'
"""

import copy
import os
import logging
import urllib.parse
from pathlib import Path
from typing import Any

import yaml

from localshortener.types import AppConfig
from localshortener.constants import ENV, Defaults, Shortcode
from localshortener.exceptions import BadConfigurationError


logger = logging.getLogger(__name__)

STORE_BACKENDS = frozenset({'memory', 'file', 'redis'})

DEFAULT_CONFIG: AppConfig = {
    'store': {
        'backend': Defaults.STORE_BACKEND,
        'path': Defaults.STORE_PATH,
        'redis': {
            'host': 'localhost',
            'port': 6379,
            'db': 0,
            'username': None,
            'password': None,
        },
    },
    'shortener': {
        'base_url': None,
        'default_validity_minutes': Defaults.VALIDITY_MINUTES,
        'shortcode_length': Shortcode.DEFAULT_LENGTH,
    },
    'logging': {
        'level': 'INFO',
        'max_entries': Defaults.MAX_LOG_ENTRIES,
    },
}


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    return os.environ.get(ENV.App.APP_NAME)


def project_root() -> Path:
    return Path(os.environ.get(ENV.App.PROJECT_ROOT, os.getcwd()))


def app_prefix() -> str | None:
    """Return application prefix for record store keys

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'localshortener'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'localshortener:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def config_dir() -> Path:
    return Path(os.environ.get(ENV.App.CONFIG_DIR, project_root() / 'config'))


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file into a Python dictionary.

    Returns {} for empty files.

    Raises:
        FileNotFoundError: If the file does not exist.
        BadConfigurationError: If the document is not valid YAML or not a mapping.
    """
    if not path.is_file():
        raise FileNotFoundError(f'YAML not found: {path}')
    with path.open('r', encoding='utf-8') as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise BadConfigurationError(f'Malformed YAML configuration {path}') from e
    if data is not None and not isinstance(data, dict):
        raise BadConfigurationError(f'Configuration {path} must be a mapping (given type: {type(data).__name__}).')
    return data or {}


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _check_sections(config: AppConfig) -> AppConfig:
    for section in DEFAULT_CONFIG:
        if not isinstance(config.get(section), dict):
            raise BadConfigurationError(f'Configuration section {section!r} must be a mapping.')
    if not isinstance(config['store'].get('redis'), dict):
        raise BadConfigurationError("Configuration section 'store.redis' must be a mapping.")
    return config


def _apply_environment_overrides(config: AppConfig) -> AppConfig:
    if backend := os.environ.get(ENV.Store.BACKEND):
        config['store']['backend'] = backend.lower()
    if path := os.environ.get(ENV.Store.PATH):
        config['store']['path'] = path
    if redis_url := os.environ.get(ENV.Store.REDIS_URL):
        components = urllib.parse.urlparse(redis_url)
        try:
            port = components.port or 6379
            db = int(components.path.lstrip('/') or 0)
        except ValueError as e:
            raise BadConfigurationError(f'Bad Redis URL {redis_url}') from e
        if components.scheme not in {'redis', 'rediss'} or not components.hostname:
            raise BadConfigurationError(f'Bad Redis URL {redis_url}')
        config['store']['redis'].update(
            host=components.hostname,
            port=port,
            db=db,
            username=components.username,
            password=components.password,
        )
    if base_url := os.environ.get(ENV.App.BASE_URL):
        config['shortener']['base_url'] = base_url
    if level := os.environ.get(ENV.App.LOG_LEVEL):
        config['logging']['level'] = level
    return config


def _validate(config: AppConfig) -> AppConfig:
    store = config['store']
    if store['backend'] not in STORE_BACKENDS:
        raise BadConfigurationError(f"Unknown store backend {store['backend']!r} (expected one of {sorted(STORE_BACKENDS)}).")
    if store['backend'] == 'file' and not store.get('path'):
        raise BadConfigurationError('File store backend requires store.path.')

    try:
        store['redis']['port'] = int(store['redis']['port'])
        store['redis']['db'] = int(store['redis']['db'])
    except (TypeError, ValueError) as e:
        raise BadConfigurationError(f"Invalid Redis port/db values: port={store['redis']['port']!r} db={store['redis']['db']!r}") from e

    shortener = config['shortener']
    base_url = shortener.get('base_url')
    if base_url:
        components = urllib.parse.urlparse(base_url)
        if components.scheme not in {'http', 'https'} or not components.hostname:
            raise BadConfigurationError(f'Bad base URL {base_url}')

    validity = shortener['default_validity_minutes']
    if isinstance(validity, bool) or not isinstance(validity, (int, float)) or validity <= 0:
        raise BadConfigurationError(f'shortener.default_validity_minutes must be a positive number (given value: {validity!r}).')

    length = shortener['shortcode_length']
    if isinstance(length, bool) or not isinstance(length, int) or length < 4:
        raise BadConfigurationError(f'shortener.shortcode_length must be an integer >= 4 (given value: {length!r}).')

    logging_config = config['logging']
    logging_config['level'] = str(logging_config['level']).upper()
    if logging_config['level'] not in logging.getLevelNamesMapping():
        raise BadConfigurationError(f"Unknown log level {logging_config['level']!r}.")
    max_entries = logging_config['max_entries']
    if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0:
        raise BadConfigurationError(f'logging.max_entries must be a positive integer (given value: {max_entries!r}).')

    return config


def load_config(env: str | None = None) -> AppConfig:
    """Load configuration for an application environment

    Args:
        env (str | None):
            Environment name. Defaults to `app_env()`.

    Returns:
        dict: fully populated and validated configuration.

    Raises:
        BadConfigurationError:
            If the YAML document or an environment override is invalid.
    """
    env = env or app_env()
    path = config_dir() / f'{env}.yaml'

    try:
        document = load_yaml(path)
    except FileNotFoundError:
        logger.debug('No configuration file found. Using defaults.', extra={'path': str(path), 'env': env})
        document = {}
    else:
        logger.debug('Loaded configuration file.', extra={'path': str(path), 'env': env})

    config = _merge(DEFAULT_CONFIG, document)
    return _validate(_apply_environment_overrides(_check_sections(config)))
