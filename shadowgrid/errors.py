"""
Error taxonomy for the ShadowGrid cipher.

All errors derive from ValueError so callers that already guard cipher
calls with `except ValueError` keep working.
"""


class ShadowGridError(ValueError):
    """Base class for every error raised by shadowgrid."""


class EmptyKeywordError(ShadowGridError):
    """Keyword is empty or whitespace-only. No transform is attempted."""

    def __init__(self, message: str = "Keyword must not be blank."):
        super().__init__(message)


class ConfigurationError(ShadowGridError):
    """Digit table, noise pool or group size is unusable."""
