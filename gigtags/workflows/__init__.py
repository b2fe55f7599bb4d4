"""
Workflows package.
"""

from .parse_wf import parse_workflow

__all__ = [
    "parse_workflow",
]
