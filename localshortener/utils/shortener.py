"""Shortcode generation and input validation utilities

This module provides helpers for generating random Base62 shortcodes,
allocating a shortcode that is not yet taken, and validating the user
supplied parts of a short URL request (original URL, validity window and
custom shortcode).

Functions:
    generate_shortcode(length=6) -> str:
        Draw `length` uniform random characters from the Base62 alphabet.
    allocate_shortcode(is_taken, length=6, attempts_per_length=10, max_widenings=4) -> str:
        Generate shortcodes until a free one is found, within a bounded budget.
    is_valid_url(candidate) -> bool:
        Check whether a string is a syntactically valid absolute URL.
    is_valid_shortcode(candidate) -> bool:
        Check whether a custom shortcode matches [A-Za-z0-9_-]{4,}.
    parse_validity(value, default=30) -> float:
        Normalize a validity window given in minutes.

Example:
    >>> from localshortener.utils import generate_shortcode, is_valid_url
    >>> generate_shortcode()  # doctest: +SKIP
    'Xq3bT9'
    >>> is_valid_url('https://example.com')
    True
    >>> is_valid_url('example.com')
    False
"""

import math
import re
import secrets
import urllib.parse
from collections.abc import Callable
from datetime import datetime, timedelta, UTC
from numbers import Real
from typing import Any

from localshortener.constants import Shortcode, Defaults
from localshortener.dao.exceptions import ShortcodeAllocationError
from localshortener.exceptions import InvalidValidityError


ALPHABET = Shortcode.ALPHABET
BASE = len(ALPHABET)

_CUSTOM_SHORTCODE_RE = re.compile(Shortcode.CUSTOM_PATTERN)
# RFC 3986 scheme: ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_RE = re.compile(r'[A-Za-z][A-Za-z0-9+.-]*')
# Schemes which are meaningless without an authority component
_HIERARCHICAL_SCHEMES = frozenset({'http', 'https', 'ftp', 'ws', 'wss'})


def generate_shortcode(length: int = Shortcode.DEFAULT_LENGTH) -> str:
    """Generate a random shortcode.

    Every character is drawn independently and uniformly from the Base62
    alphabet [a-zA-Z0-9].

    Args:
        length (int, optional):
            Number of characters. Defaults to 6.

    Raises:
        TypeError: if `length` is not an integer.
        ValueError: if `length` is not positive.

    Example:
        >>> len(generate_shortcode(8))
        8
    """
    if not isinstance(length, int) or isinstance(length, bool):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length <= 0:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def allocate_shortcode(
    is_taken: Callable[[str], bool],
    length: int = Shortcode.DEFAULT_LENGTH,
    attempts_per_length: int = Shortcode.ATTEMPTS_PER_LENGTH,
    max_widenings: int = Shortcode.MAX_WIDENINGS,
) -> str:
    """Generate a shortcode which is not taken yet.

    Up to `attempts_per_length` random candidates are drawn at the requested
    length. If all of them collide, the length is widened by one character
    and the process repeats, at most `max_widenings` times. The loop therefore
    always terminates after `attempts_per_length * (max_widenings + 1)`
    candidates.

    Args:
        is_taken (Callable[[str], bool]):
            Predicate telling whether a candidate shortcode is already in use.
        length (int, optional):
            Initial shortcode length. Defaults to 6.
        attempts_per_length (int, optional):
            Candidates drawn per length. Defaults to 10.
        max_widenings (int, optional):
            How many times the length may grow by one. Defaults to 4.

    Returns:
        str: a free shortcode.

    Raises:
        ShortcodeAllocationError:
            If every candidate collided.
    """
    for current_length in range(length, length + max_widenings + 1):
        for _ in range(attempts_per_length):
            candidate = generate_shortcode(current_length)
            if not is_taken(candidate):
                return candidate

    raise ShortcodeAllocationError(
        f'Unable to allocate a free shortcode after {attempts_per_length * (max_widenings + 1)} attempts '
        f'(lengths {length}-{length + max_widenings}).'
    )


def is_valid_url(candidate: Any) -> bool:
    """Check whether `candidate` is a syntactically valid absolute URL.

    An absolute URL needs a scheme and something after it. Web schemes
    (http, https, ftp, ws, wss) additionally need a host. Any parse failure
    (including invalid ports and malformed IPv6 literals) means invalid.

    Example:
        >>> is_valid_url('https://example.com/path?q=1')
        True
        >>> is_valid_url('mailto:someone@example.com')
        True
        >>> is_valid_url('http://')
        False
        >>> is_valid_url('/relative/path')
        False
    """
    if not isinstance(candidate, str) or not candidate.strip():
        return False
    if candidate != candidate.strip() or any(c.isspace() for c in candidate):
        return False

    try:
        components = urllib.parse.urlsplit(candidate)
        components.port  # noqa: B018 raises ValueError on an out-of-range or non-numeric port
    except ValueError:
        return False

    if not components.scheme or not _SCHEME_RE.fullmatch(components.scheme):
        return False
    if components.scheme.lower() in _HIERARCHICAL_SCHEMES:
        return bool(components.hostname)
    return bool(components.netloc or components.path)


def is_valid_shortcode(candidate: Any) -> bool:
    """Check whether a custom shortcode matches [A-Za-z0-9_-]{4,}.

    Example:
        >>> is_valid_shortcode('my-link_1')
        True
        >>> is_valid_shortcode('abc')
        False
    """
    return isinstance(candidate, str) and _CUSTOM_SHORTCODE_RE.fullmatch(candidate) is not None


def parse_validity(value: Any, default: float = Defaults.VALIDITY_MINUTES) -> float:
    """Normalize a validity window given in minutes.

    `None` falls back to `default`. Numbers and numeric strings are accepted
    as long as they are finite, strictly positive and small enough for the
    resulting expiry to fit in a `datetime`.

    Raises:
        InvalidValidityError: for booleans, non-numeric, non-finite, zero, negative or out-of-range values.

    Example:
        >>> parse_validity(None)
        30
        >>> parse_validity('15')
        15.0
        >>> parse_validity(1e10)
        Traceback (most recent call last):
        ...
        localshortener.exceptions.InvalidValidityError: Validity is out of range (given value: 10000000000.0).
    """
    if value is None:
        return default

    if isinstance(value, bool):
        raise InvalidValidityError(f'Validity must be a positive number (given value: {value!r}).')
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError as e:
            raise InvalidValidityError(f'Validity must be a positive number (given value: {value!r}).') from e
    if not isinstance(value, Real):
        raise InvalidValidityError(f'Validity must be a positive number (given value: {value!r}).')

    try:
        minutes = float(value)
        if not math.isfinite(minutes) or minutes <= 0:
            raise InvalidValidityError(f'Validity must be a positive number (given value: {value!r}).')
        # timedelta() and the datetime addition both raise OverflowError past their ranges
        datetime.now(UTC) + timedelta(minutes=minutes)
    except OverflowError as e:
        raise InvalidValidityError(f'Validity is out of range (given value: {value!r}).') from e

    return minutes
