"""
DTO package.
"""

from .config_dto import DuplicatePolicy, GrammarConfig
from .tags_dto import Segment, Span, SpanKind, Tag, TagCollection

__all__ = [
    "DuplicatePolicy",
    "GrammarConfig",
    "Segment",
    "Span",
    "SpanKind",
    "Tag",
    "TagCollection",
]
