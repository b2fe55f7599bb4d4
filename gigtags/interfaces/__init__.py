"""
Interfaces package.
"""

from .tags_api import parse, serialize

__all__ = [
    "parse",
    "serialize",
]
