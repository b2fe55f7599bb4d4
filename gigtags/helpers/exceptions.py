"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class GigtagsError(Exception):
    """Base class for all errors raised by gigtags."""


class CodecError(GigtagsError, ValueError):
    """Raised when a percent-encoded term cannot be decoded.

    Local to a single tag candidate: the validator catches it and
    requalifies the candidate as plain text.
    """


class InvalidEscapeError(CodecError):
    """Raised when '%' is not followed by two hex digits."""


class InvalidEncodingError(CodecError):
    """Raised when the decoded bytes are not valid UTF-8."""


class TypedValueError(GigtagsError, ValueError):
    """Raised when a term does not represent the requested semantic type."""


class NotATimestampError(TypedValueError):
    """Raised when a term matches none of the supported date/time formats."""


class NotAUrlError(TypedValueError):
    """Raised when a term is not an absolute URL."""


class InvalidTagError(GigtagsError, ValueError):
    """Raised when a Tag is constructed with an invalid facet or term."""


class ConfigError(GigtagsError):
    """Raised when a configuration value is out of range or of the wrong type."""
