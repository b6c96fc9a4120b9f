"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortURLNotFoundError:
        Raised when a ShortURLModel is not found in the record store.

    ShortcodeTakenError:
        Raised when attempting to insert a ShortURLModel whose shortcode is in use.

    ShortcodeAllocationError:
        Raised when no free shortcode could be generated within the retry budget.

    DataStoreError:
        Raised when the record store fails (I/O errors, corrupt payloads, connection issues, etc.).

Example:
    >>> from localshortener.dao.exceptions import ShortcodeTakenError
    >>> raise ShortcodeTakenError("Shortcode 'abcd' is already in use.")
    Traceback (most recent call last):
        ...
    localshortener.dao.exceptions.ShortcodeTakenError: Shortcode 'abcd' is already in use.
"""

from localshortener.exceptions import LocalShortenerError


class DAOError(LocalShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortURLNotFoundError(DAOError):
    """Raised when a ShortURLModel is not found in the record store."""

    error_code = 'dao:short_url_not_found'


class ShortcodeTakenError(DAOError):
    """Raised when inserting a ShortURLModel whose shortcode already exists."""

    error_code = 'dao:shortcode_taken'


class ShortcodeAllocationError(DAOError):
    """Raised when every generated shortcode candidate collided."""

    error_code = 'dao:shortcode_allocation_error'


class DataStoreError(DAOError):
    """Raised when the record store encounters an error.

    Examples include unreadable files, corrupt JSON payloads and Redis connection issues.
    """

    error_code = 'dao:data_store_error'
