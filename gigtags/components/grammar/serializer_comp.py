"""Canonical serializer for tags and tag collections.

Canonical tag form: '#' + facet, followed by ':' + encode(term) only when
the tag has a term. Residual text is written back verbatim, so
parse(serialize(parse(s))) yields the same tags as parse(s).
"""

from __future__ import annotations

from gigtags.components.grammar.codec_comp import encode
from gigtags.components.grammar.grammar_rules_comp import MARKER, SEPARATOR
from gigtags.helpers.dto.tags_dto import Tag, TagCollection


def format_tag(tag: Tag) -> str:
    """Render a single tag in canonical form."""
    if tag.term is None:
        return f"{MARKER}{tag.facet}"
    return f"{MARKER}{tag.facet}{SEPARATOR}{encode(tag.term)}"


def serialize(collection: TagCollection) -> str:
    """
    Render a collection back to text.

    Segments are emitted in source order: text verbatim, tags in canonical
    form. Duplicate occurrences were kept as text at parse time and are
    emitted as written.
    """
    return "".join(
        segment if isinstance(segment, str) else format_tag(segment) for segment in collection.segments
    )


def format_tags(tags: list[Tag] | tuple[Tag, ...], separator: str = " ") -> str:
    """Render tags alone, joined by separator, e.g. for building a fresh comment field."""
    return separator.join(format_tag(tag) for tag in tags)
