"""
Grammar rules for tag tokens.

Character-class predicates and length constraints shared by the scanner,
validator, codec and serializer.

Tag syntax:
- #facet
- #facet:term

Token characters:
- Unicode letters, digits and combining marks (categories L*, N*, M*)
- '-', '_', '~'

A facet is one or more token characters. A term, in its encoded form, is
one or more token characters or '%XX' escapes. Facet and term share the
charset; they differ only by position.
"""

from __future__ import annotations

import functools
import unicodedata

from gigtags.helpers.dto.config_dto import GrammarConfig

MARKER = "#"
SEPARATOR = ":"
ESCAPE = "%"

# Punctuation allowed inside facets and terms besides letters/digits/marks
TOKEN_PUNCTUATION = frozenset("-_~")

# Unicode general category majors that count as word characters
_WORD_CATEGORIES = frozenset("LNM")


@functools.lru_cache(maxsize=4096)
def is_word_char(ch: str) -> bool:
    """Check if ch is a letter, digit or combining mark."""
    return unicodedata.category(ch)[0] in _WORD_CATEGORIES


def is_token_char(ch: str) -> bool:
    """Check if ch may appear unescaped in a facet or term."""
    return ch in TOKEN_PUNCTUATION or is_word_char(ch)


def is_term_char(ch: str) -> bool:
    """Check if ch may appear in the encoded form of a term."""
    return ch == ESCAPE or is_token_char(ch)


def is_valid_facet(facet: str) -> bool:
    """
    Check facet charset.

    Length limits are configuration-dependent; see facet_within_limit().
    """
    return bool(facet) and all(is_token_char(ch) for ch in facet)


def facet_within_limit(facet: str, config: GrammarConfig) -> bool:
    return len(facet) <= config.max_facet_length


def is_valid_encoded_term(term: str) -> bool:
    """Check the charset of a term before decoding (escapes are checked by the codec)."""
    return bool(term) and all(is_term_char(ch) for ch in term)


def term_within_limit(encoded_term: str, config: GrammarConfig) -> bool:
    return len(encoded_term) <= config.max_term_length


def is_start_boundary(text: str, index: int) -> bool:
    """
    Check if a marker at text[index] may start a tag.

    A tag must not begin mid-word: the preceding character, if any, must
    not be a letter, digit or combining mark.
    """
    return index == 0 or not is_word_char(text[index - 1])
