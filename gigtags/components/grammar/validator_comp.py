"""Validator - turn tag candidates into Tags or back into plain text.

Checks, in order:
1. facet is non-empty, grammar-conformant and within the length limit
2. if a separator is present: the encoded term is within the length
   limit, decodes without a CodecError and is non-empty after decoding

Any failure degrades the candidate to text. Validation never raises:
ambiguous input is treated as prose rather than rejected.
"""

from __future__ import annotations

import logging

from gigtags.components.grammar.codec_comp import decode
from gigtags.components.grammar.grammar_rules_comp import (
    facet_within_limit,
    is_valid_encoded_term,
    is_valid_facet,
    term_within_limit,
)
from gigtags.helpers.dto.config_dto import GrammarConfig
from gigtags.helpers.dto.tags_dto import Span, Tag
from gigtags.helpers.exceptions import CodecError

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG = GrammarConfig()


def validate(span: Span, text: str, config: GrammarConfig | None = None) -> Tag | str:
    """
    Validate one candidate span of text.

    Args:
        span: TAG_CANDIDATE span produced by scan(text)
        text: The scanned input
        config: Grammar limits (defaults to GrammarConfig())

    Returns:
        The constructed Tag on success, otherwise the candidate's original
        substring so the caller can requalify it as plain text
    """
    cfg = config or _DEFAULT_CONFIG
    raw = span.slice(text)
    facet_end = span.separator if span.separator is not None else span.end
    facet = text[span.start + 1 : facet_end]

    if not is_valid_facet(facet):
        logger.debug(f"[validator] Rejected {raw!r}: empty or malformed facet")
        return raw
    if not facet_within_limit(facet, cfg):
        logger.debug(f"[validator] Rejected facet of {len(facet)} chars (max {cfg.max_facet_length})")
        return raw

    if span.separator is None:
        return Tag(facet=facet)

    encoded_term = text[span.separator + 1 : span.end]
    if not is_valid_encoded_term(encoded_term):
        logger.debug(f"[validator] Rejected {raw!r}: empty or malformed term")
        return raw
    if not term_within_limit(encoded_term, cfg):
        logger.debug(f"[validator] Rejected term of {len(encoded_term)} chars (max {cfg.max_term_length})")
        return raw

    try:
        term = decode(encoded_term)
    except CodecError as e:
        logger.debug(f"[validator] Rejected {raw!r}: {e}")
        return raw

    if not term:
        return raw
    return Tag(facet=facet, term=term)
