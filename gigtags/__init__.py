"""
gigtags - a lightweight, textual tagging system for DJs.

Tags are inline tokens '#facet' or '#facet:term' embedded in free-form
text fields such as track titles or set-list comments:

    >>> from gigtags import parse
    >>> tags = parse("Warm up #energy:low #genre:deep-house")
    >>> [tag.term for tag in tags.tags_for("genre")]
    ['deep-house']
"""

from .__version__ import __version__
from .components.grammar.codec_comp import decode, encode
from .helpers.dto.config_dto import GrammarConfig
from .helpers.dto.tags_dto import Tag, TagCollection
from .helpers.exceptions import (
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
from .interfaces.tags_api import parse, serialize

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
    "Tag",
    "TagCollection",
    "TypedValueError",
    "__version__",
    "decode",
    "encode",
    "parse",
    "serialize",
]
