"""
Helpers package.
"""

from .dto.config_dto import GrammarConfig
from .dto.tags_dto import Span, SpanKind, Tag, TagCollection
from .exceptions import (
    CodecError,
    ConfigError,
    GigtagsError,
    InvalidEncodingError,
    InvalidEscapeError,
    InvalidTagError,
    NotATimestampError,
    NotAUrlError,
    TypedValueError,
)

__all__ = [
    "CodecError",
    "ConfigError",
    "GigtagsError",
    "GrammarConfig",
    "InvalidEncodingError",
    "InvalidEscapeError",
    "InvalidTagError",
    "NotATimestampError",
    "NotAUrlError",
    "Span",
    "SpanKind",
    "Tag",
    "TagCollection",
    "TypedValueError",
]
