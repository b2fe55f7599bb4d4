"""
Tag grammar package.
"""

from .codec_comp import decode, encode
from .facet_comp import (
    facet_with_date_suffix,
    has_date_like_suffix,
    has_invalid_date_like_suffix,
    try_split_date_like_suffix,
    try_split_date_suffix,
)
from .grammar_rules_comp import (
    ESCAPE,
    MARKER,
    SEPARATOR,
    is_start_boundary,
    is_term_char,
    is_token_char,
    is_valid_encoded_term,
    is_valid_facet,
)
from .scanner_comp import ScanState, scan
from .serializer_comp import format_tag, format_tags, serialize
from .typed_value_comp import TIMESTAMP_FORMATS, parse_timestamp, parse_url
from .validator_comp import validate

__all__ = [
    "ESCAPE",
    "MARKER",
    "SEPARATOR",
    "TIMESTAMP_FORMATS",
    "ScanState",
    "decode",
    "encode",
    "facet_with_date_suffix",
    "format_tag",
    "format_tags",
    "has_date_like_suffix",
    "has_invalid_date_like_suffix",
    "is_start_boundary",
    "is_term_char",
    "is_token_char",
    "is_valid_encoded_term",
    "is_valid_facet",
    "parse_timestamp",
    "parse_url",
    "scan",
    "serialize",
    "try_split_date_like_suffix",
    "try_split_date_suffix",
    "validate",
]
