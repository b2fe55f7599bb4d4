"""Public entry points for integrators.

The library's only boundary is in-memory text: strings in, TagCollection
out, and back.
"""

from __future__ import annotations

from gigtags.components.grammar import serializer_comp
from gigtags.helpers.dto.config_dto import GrammarConfig
from gigtags.helpers.dto.tags_dto import TagCollection
from gigtags.services.config_svc import get_default_grammar_config
from gigtags.workflows.parse_wf import parse_workflow


def parse(text: str, config: GrammarConfig | None = None) -> TagCollection:
    """Parse tags embedded in text.

    Never raises for str input: malformed tags are kept as plain text.

    Args:
        text: Title, comment or any other free-form text field
        config: Grammar limits and duplicate policy (defaults to the
            process-wide configuration)

    Returns:
        TagCollection with unique tags in order of first occurrence

    Example:
        >>> [str(tag) for tag in parse("Warm up #energy:low #genre:deep-house")]
        ['#energy:low', '#genre:deep-house']
    """
    return parse_workflow(text, config or get_default_grammar_config())


def serialize(collection: TagCollection) -> str:
    """Render a TagCollection in canonical textual form."""
    return serializer_comp.serialize(collection)
