import pytest

from localshortener.commands.context import CommandContext
from localshortener.utils.config import DEFAULT_CONFIG, _merge


@pytest.fixture
def base_url():
    return 'https://sho.rt'


@pytest.fixture
def config(base_url):
    return _merge(DEFAULT_CONFIG, {'store': {'backend': 'memory'}, 'shortener': {'base_url': base_url}})


@pytest.fixture
def context(config, store):
    """Command context over the shared in-memory store."""
    return CommandContext.from_config(config, store=store)
