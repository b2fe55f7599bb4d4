"""Parse workflow - orchestrate scanner, validator and collection building."""

from __future__ import annotations

import logging

from gigtags.components.grammar.scanner_comp import scan
from gigtags.components.grammar.validator_comp import validate
from gigtags.helpers.dto.config_dto import GrammarConfig
from gigtags.helpers.dto.tags_dto import Segment, Tag, TagCollection

logger = logging.getLogger(__name__)


def parse_workflow(text: str, config: GrammarConfig) -> TagCollection:
    """Parse one input string into a TagCollection.

    Candidates that fail validation and tags rejected by the duplicate
    policy are merged back into the surrounding text verbatim, so
    serializing the collection reproduces all non-tag content. Never
    raises for str input.

    Args:
        text: Raw input containing prose and tags
        config: Grammar limits and duplicate policy

    Returns:
        TagCollection with unique tags in order of first occurrence

    """
    tags: list[Tag] = []
    segments: list[Segment] = []
    pending_text: list[str] = []
    seen_tags: set[Tag] = set()
    seen_facets: set[str] = set()

    for span in scan(text):
        if not span.is_candidate:
            pending_text.append(span.slice(text))
            continue

        result = validate(span, text, config)
        if isinstance(result, str):
            pending_text.append(result)
            continue

        if result in seen_tags or (config.duplicate_policy == "facet" and result.facet in seen_facets):
            logger.debug(f"[parse] Kept duplicate {result} as text ({config.duplicate_policy} policy)")
            pending_text.append(span.slice(text))
            continue

        if pending_text:
            segments.append("".join(pending_text))
            pending_text.clear()
        segments.append(result)
        tags.append(result)
        seen_tags.add(result)
        seen_facets.add(result.facet)

    if pending_text:
        segments.append("".join(pending_text))

    logger.debug(f"[parse] Collected {len(tags)} tag(s) from {len(text)} chars")
    return TagCollection(tags=tuple(tags), segments=tuple(segments))
