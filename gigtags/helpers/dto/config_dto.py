"""Configuration DTOs for the tag grammar engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

DuplicatePolicy = Literal["pair", "facet"]


@dataclass(frozen=True)
class GrammarConfig:
    """
    Tunable limits and policies of the tag grammar.

    All fields have defaults so GrammarConfig() is always usable.
    Validation of externally supplied values happens in ConfigService.

    Attributes:
        max_facet_length: Longest accepted facet, in characters. Longer
            facets are malformed and stay plain text.
        max_term_length: Longest accepted term, in characters of its
            percent-encoded form.
        duplicate_policy: How repeated tags collapse inside a collection:
            - "pair": drop a tag equal in facet and term to an earlier one
            - "facet": drop any tag whose facet was already collected
    """

    max_facet_length: int = 128
    max_term_length: int = 1024
    duplicate_policy: DuplicatePolicy = "pair"
