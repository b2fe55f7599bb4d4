"""Tag DTOs - the value types produced by parsing and consumed by serialization.

This module defines:
- Tag: one parsed tag (facet + optional decoded term), immutable and hashable
- SpanKind / Span: scanner output, offsets into the original input
- Segment: either verbatim text or a Tag, in source order
- TagCollection: ordered unique tags of one input plus its residual text

Usage:
    from gigtags import parse

    collection = parse("Warm up #energy:low #genre:deep-house")
    for tag in collection.tags_for("genre"):
        print(tag.term)
    text = collection.serialize()

Tags hold copies of their facet and term, never views into the source
string, so they stay valid after the input is discarded.
"""

from __future__ import annotations

import functools
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import TYPE_CHECKING

from gigtags.helpers.exceptions import InvalidTagError

if TYPE_CHECKING:
    from pydantic import AnyUrl


@functools.total_ordering
@dataclass(frozen=True)
class Tag:
    """Single tag: a facet and an optional term.

    Invariants (checked on construction):
    - facet is non-empty and made only of token characters
    - term is None or a non-empty decoded string

    Equality is exact and case-sensitive on (facet, term). Ordering is by
    facet, then tags without a term first, then by term.
    """

    facet: str
    term: str | None = None

    def __post_init__(self) -> None:
        from gigtags.components.grammar.grammar_rules_comp import is_valid_facet

        if not isinstance(self.facet, str) or not is_valid_facet(self.facet):
            msg = f"Invalid facet: {self.facet!r}"
            raise InvalidTagError(msg)
        if self.term is not None and (not isinstance(self.term, str) or not self.term):
            msg = f"Invalid term for facet {self.facet!r}: {self.term!r}"
            raise InvalidTagError(msg)

    def _sort_key(self) -> tuple[str, bool, str]:
        return (self.facet, self.term is not None, self.term or "")

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Tag):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        return self.to_text()

    @classmethod
    def with_date_suffix(cls, prefix: str, suffix_date: date, term: str | None = None) -> Tag:
        """Build a tag whose facet is prefix + '~yyyyMMdd'.

        Example:
            >>> Tag.with_date_suffix("played", date(2024, 7, 1))
            Tag(facet='played~20240701', term=None)
        """
        from gigtags.components.grammar.facet_comp import facet_with_date_suffix

        return cls(facet=facet_with_date_suffix(prefix, suffix_date), term=term)

    @property
    def has_term(self) -> bool:
        return self.term is not None

    def encoded_term(self) -> str | None:
        """Return the percent-encoded term, or None if the tag has no term."""
        if self.term is None:
            return None
        from gigtags.components.grammar.codec_comp import encode

        return encode(self.term)

    def to_text(self) -> str:
        """Render this tag in canonical form, e.g. '#date:2024-07-01T22%3A00%3A00'."""
        from gigtags.components.grammar.serializer_comp import format_tag

        return format_tag(self)

    def date_suffix(self) -> tuple[str, date | None] | None:
        """Split the facet into (prefix, date) if it carries a '~yyyyMMdd' suffix.

        Returns None when there is no date-like suffix; the date is None
        when the suffix is date-like but not a real calendar date.
        """
        from gigtags.components.grammar.facet_comp import try_split_date_suffix

        return try_split_date_suffix(self.facet)

    def as_timestamp(self) -> datetime:
        """Interpret the term as a timestamp.

        Raises:
            NotATimestampError: If the tag has no term or no format matches
        """
        from gigtags.components.grammar.typed_value_comp import parse_timestamp

        return parse_timestamp(self.term)

    def as_url(self) -> AnyUrl:
        """Interpret the term as an absolute URL.

        Raises:
            NotAUrlError: If the tag has no term or it is not an absolute URL
        """
        from gigtags.components.grammar.typed_value_comp import parse_url

        return parse_url(self.term)


class SpanKind(Enum):
    """Classification of a scanned region of the input."""

    TEXT = "text"
    TAG_CANDIDATE = "tag_candidate"


@dataclass(frozen=True)
class Span:
    """Half-open region [start, end) of the scanned input.

    For tag candidates, separator is the absolute index of the ':' between
    facet and term, or None when the candidate has no term part.
    """

    kind: SpanKind
    start: int
    end: int
    separator: int | None = None

    @property
    def is_candidate(self) -> bool:
        return self.kind is SpanKind.TAG_CANDIDATE

    def slice(self, text: str) -> str:
        """Return the substring of text covered by this span."""
        return text[self.start : self.end]


# Residual text is kept verbatim as str; collected tags as Tag
Segment = str | Tag


@dataclass(frozen=True)
class TagCollection:
    """Ordered, de-duplicated tags extracted from one input string.

    Attributes:
        tags: Unique tags in order of first occurrence
        segments: Residual text and collected tags in source order, enough
            to re-render the surrounding prose around the tags
    """

    tags: tuple[Tag, ...] = ()
    segments: tuple[Segment, ...] = ()

    def __len__(self) -> int:
        """Return number of tags."""
        return len(self.tags)

    def __iter__(self) -> Iterator[Tag]:
        """Allow iteration over tags."""
        return iter(self.tags)

    def __contains__(self, item: object) -> bool:
        return item in self.tags

    def __str__(self) -> str:
        return self.serialize()

    def tags_for(self, facet: str) -> tuple[Tag, ...]:
        """Get all tags with the given facet, in insertion order."""
        return tuple(tag for tag in self.tags if tag.facet == facet)

    def first(self, facet: str) -> Tag | None:
        """Get the first tag with the given facet, or None."""
        for tag in self.tags:
            if tag.facet == facet:
                return tag
        return None

    def has_facet(self, facet: str) -> bool:
        """Check if any tag has the given facet."""
        return any(tag.facet == facet for tag in self.tags)

    def facets(self) -> tuple[str, ...]:
        """Distinct facets in order of first occurrence."""
        return tuple(dict.fromkeys(tag.facet for tag in self.tags))

    def text_segments(self) -> tuple[str, ...]:
        """Residual plain-text segments in source order."""
        return tuple(segment for segment in self.segments if isinstance(segment, str))

    def text(self) -> str:
        """Residual plain text with all collected tags removed."""
        return "".join(self.text_segments())

    def serialize(self) -> str:
        """Render the collection in canonical textual form."""
        from gigtags.components.grammar.serializer_comp import serialize

        return serialize(self)
