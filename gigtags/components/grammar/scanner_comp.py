"""Scanner - segment mixed text into text spans and tag-candidate spans.

Single pass over the input with an explicit state machine:

    TEXT       prose; a '#' at a start boundary opens a candidate
    FACET      token characters; ':' switches to TERM
    TERM       token characters and '%'
    AMBIGUOUS  a candidate ran into a mid-word '#'; the rest of the
               non-whitespace run is prose

A candidate ends at the first character its state does not accept. The
scanner never looks behind a confirmed boundary and never validates:
'#', '#:' and '#mood:' are all emitted as candidates and left to the
validator.
"""

from __future__ import annotations

import logging
from enum import Enum

from gigtags.components.grammar.grammar_rules_comp import (
    MARKER,
    SEPARATOR,
    is_start_boundary,
    is_term_char,
    is_token_char,
)
from gigtags.helpers.dto.tags_dto import Span, SpanKind

logger = logging.getLogger(__name__)


class ScanState(Enum):
    """Scanner states for the state machine"""

    TEXT = 1
    FACET = 2
    TERM = 3
    AMBIGUOUS = 4


def scan(text: str) -> list[Span]:
    """
    Split text into ordered, contiguous spans.

    Adjacent text is merged into one span, so text spans and candidate
    spans together cover the input exactly once, in order.

    Args:
        text: Raw input (title, comment, ...)

    Returns:
        List of TEXT and TAG_CANDIDATE spans

    Example:
        >>> [s.slice(t) for t in ["Warm up #energy:low"] for s in scan(t)]
        ['Warm up ', '#energy:low']
    """
    spans: list[Span] = []
    state = ScanState.TEXT
    text_start = 0
    candidate_start = 0
    separator: int | None = None
    length = len(text)
    i = 0

    while i < length:
        ch = text[i]

        if state is ScanState.TEXT:
            if ch == MARKER and is_start_boundary(text, i):
                candidate_start = i
                separator = None
                state = ScanState.FACET
            i += 1
            continue

        if state is ScanState.AMBIGUOUS:
            if ch.isspace():
                state = ScanState.TEXT
            else:
                i += 1
            continue

        if state is ScanState.FACET:
            if is_token_char(ch):
                i += 1
                continue
            if ch == SEPARATOR:
                separator = i
                state = ScanState.TERM
                i += 1
                continue
        elif is_term_char(ch):
            i += 1
            continue

        # Candidate ends before ch
        if ch == MARKER and not is_start_boundary(text, i):
            # Tags glued together mid-word: the whole run is prose
            state = ScanState.AMBIGUOUS
            continue

        if candidate_start > text_start:
            spans.append(Span(SpanKind.TEXT, text_start, candidate_start))
        spans.append(Span(SpanKind.TAG_CANDIDATE, candidate_start, i, separator))
        text_start = i
        # Reprocess ch in TEXT state, it may open the next candidate
        state = ScanState.TEXT

    if state is ScanState.FACET or state is ScanState.TERM:
        if candidate_start > text_start:
            spans.append(Span(SpanKind.TEXT, text_start, candidate_start))
        spans.append(Span(SpanKind.TAG_CANDIDATE, candidate_start, length, separator))
    elif length > text_start:
        spans.append(Span(SpanKind.TEXT, text_start, length))

    logger.debug("[scanner] %d span(s) in %d chars", len(spans), length)
    return spans
