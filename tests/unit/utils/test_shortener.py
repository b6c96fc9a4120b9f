"""Unit tests for the shortcode and validation helpers in shortener.py.

Test coverage includes:

1. Shortcode generation
   - Ensures generated shortcodes have the requested length and Base62 alphabet.
   - Ensures invalid lengths raise appropriate exceptions.

2. Shortcode allocation
   - Ensures free candidates are returned immediately.
   - Ensures the length widens after repeated collisions.
   - Ensures allocation terminates with ShortcodeAllocationError.

3. URL validation
4. Custom shortcode validation
5. Validity window parsing
"""

import re
import string
from unittest.mock import patch

import pytest

from localshortener.dao.exceptions import ShortcodeAllocationError
from localshortener.exceptions import InvalidValidityError
from localshortener.utils import shortener
from localshortener.utils.shortener import (
    generate_shortcode,
    allocate_shortcode,
    is_valid_url,
    is_valid_shortcode,
    parse_validity,
)


# -------------------------------
# 1. Shortcode generation
# -------------------------------


def test_generate_shortcode_default_length_and_alphabet():
    """Ensure default shortcodes are 6 Base62 characters."""
    for _ in range(200):
        assert re.fullmatch(r'[A-Za-z0-9]{6}', generate_shortcode())


def test_generate_shortcode_respects_length():
    assert len(generate_shortcode(10)) == 10


def test_alphabet_is_base62():
    assert set(shortener.ALPHABET) == set(string.ascii_letters + string.digits)
    assert shortener.BASE == 62


@pytest.mark.parametrize('length', [None, '6', 6.0, True])
def test_generate_shortcode_invalid_length_type(length):
    with pytest.raises(TypeError):
        generate_shortcode(length)


@pytest.mark.parametrize('length', [0, -3])
def test_generate_shortcode_invalid_length_value(length):
    with pytest.raises(ValueError):
        generate_shortcode(length)


# -------------------------------
# 2. Shortcode allocation
# -------------------------------


def test_allocate_shortcode_returns_first_free_candidate():
    assert len(allocate_shortcode(lambda candidate: False)) == 6


def test_allocate_shortcode_retries_on_collision():
    """Ensure taken candidates are skipped."""
    with patch.object(shortener, 'generate_shortcode', side_effect=['taken1', 'taken2', 'free01']):
        result = allocate_shortcode(lambda candidate: candidate.startswith('taken'))
    assert result == 'free01'


def test_allocate_shortcode_widens_length_after_attempts():
    """Ensure the length grows by one once every candidate of a length collided."""
    result = allocate_shortcode(lambda candidate: len(candidate) < 8, length=6, attempts_per_length=3)
    assert len(result) == 8


def test_allocate_shortcode_is_bounded():
    """Ensure allocation gives up after attempts_per_length * (max_widenings + 1) candidates."""
    calls = []

    def is_taken(candidate):
        calls.append(candidate)
        return True

    with pytest.raises(ShortcodeAllocationError):
        allocate_shortcode(is_taken, length=6, attempts_per_length=10, max_widenings=4)

    assert len(calls) == 50
    assert {len(candidate) for candidate in calls} == {6, 7, 8, 9, 10}


# -------------------------------
# 3. URL validation
# -------------------------------


@pytest.mark.parametrize(
    'candidate',
    [
        'https://example.com',
        'http://localhost:3000/abc',
        'https://example.com/path?q=1#frag',
        'ftp://files.example.com/pub',
        'mailto:someone@example.com',
        'http://[::1]:8080/',
    ],
)
def test_valid_urls(candidate):
    assert is_valid_url(candidate) is True


@pytest.mark.parametrize(
    'candidate',
    [
        '',
        '   ',
        'example.com',
        '/relative/path',
        'http://',
        'https://exa mple.com',
        'http://example.com:99999',
        'http://[::1',
        '1http://example.com',
        None,
        42,
    ],
)
def test_invalid_urls(candidate):
    assert is_valid_url(candidate) is False


# -------------------------------
# 4. Custom shortcode validation
# -------------------------------


@pytest.mark.parametrize('candidate', ['abcd', 'my-link', 'under_score', 'ABC123xyz'])
def test_valid_shortcodes(candidate):
    assert is_valid_shortcode(candidate) is True


@pytest.mark.parametrize('candidate', ['abc', 'has space', 'emoji😀', 'slash/code', 'dot.code', '', None, 1234])
def test_invalid_shortcodes(candidate):
    assert is_valid_shortcode(candidate) is False


# -------------------------------
# 5. Validity window parsing
# -------------------------------


def test_parse_validity_defaults_when_missing():
    assert parse_validity(None) == 30
    assert parse_validity(None, default=5) == 5


@pytest.mark.parametrize('value, expected', [(1, 1), (2.5, 2.5), ('15', 15.0), (' 45 ', 45.0)])
def test_parse_validity_accepts_positive_numbers(value, expected):
    assert parse_validity(value) == expected


@pytest.mark.parametrize('value', [0, -1, -0.5, 'abc', '', 'nan', float('inf'), True, [], {}])
def test_parse_validity_rejects_invalid_values(value):
    with pytest.raises(InvalidValidityError):
        parse_validity(value)


@pytest.mark.parametrize('value', [1e10, 10**20, 10**400, '99999999999'])
def test_parse_validity_rejects_out_of_range_values(value):
    with pytest.raises(InvalidValidityError, match='out of range'):
        parse_validity(value)
