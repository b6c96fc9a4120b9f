class LocalShortenerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:localshortener_error'


class ValidationError(LocalShortenerError):
    """Base exception for rejected user input."""

    error_code = 'validation:validation_error'


class InvalidUrlError(ValidationError):
    """Raised when the original URL is not a syntactically valid absolute URL."""

    error_code = 'validation:invalid_url'


class InvalidValidityError(ValidationError):
    """Raised when the validity window is not a positive number of minutes."""

    error_code = 'validation:invalid_validity'


class InvalidShortcodeFormatError(ValidationError):
    """Raised when a custom shortcode doesn't match [A-Za-z0-9_-]{4,}."""

    error_code = 'validation:invalid_shortcode_format'


class BatchTooLargeError(ValidationError):
    """Raised when more URLs are submitted at once than allowed."""

    error_code = 'validation:batch_too_large'


class ConfigurationError(LocalShortenerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class BadConfigurationError(ConfigurationError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'
