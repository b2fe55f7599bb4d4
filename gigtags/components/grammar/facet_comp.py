"""Facet helpers for date-like suffixes.

A facet may end with '~yyyyMMdd' to scope it to a calendar day, e.g.
'played~20240701'. The '~' must start the facet or follow a
non-whitespace character.
"""

from __future__ import annotations

import re
from datetime import date, datetime

DATE_SUFFIX_FORMAT = "~%Y%m%d"

# ~yyyyMMdd
DATE_LIKE_SUFFIX_LEN = 1 + 8

_DATE_LIKE_SUFFIX_PATTERN = re.compile(r"(?:^|\S)~[0-9]{8}\Z")
_INVALID_DATE_LIKE_SUFFIX_PATTERN = re.compile(r"\s+~[0-9]{8}\Z")


def has_date_like_suffix(facet: str) -> bool:
    """Check for a '~yyyyMMdd' suffix (the digits need not be a real date)."""
    return _DATE_LIKE_SUFFIX_PATTERN.search(facet) is not None


def has_invalid_date_like_suffix(facet: str) -> bool:
    """Check for a date-like suffix preceded by whitespace."""
    return _INVALID_DATE_LIKE_SUFFIX_PATTERN.search(facet) is not None


def try_split_date_like_suffix(facet: str) -> tuple[str, str] | None:
    """
    Split a facet into prefix and the trailing '~yyyyMMdd' suffix.

    Returns:
        (prefix, suffix) or None if the facet has no date-like suffix

    Example:
        >>> try_split_date_like_suffix("played~20240701")
        ('played', '~20240701')
    """
    if len(facet) < DATE_LIKE_SUFFIX_LEN:
        return None
    prefix_len = len(facet) - DATE_LIKE_SUFFIX_LEN
    suffix = facet[prefix_len:]
    if suffix[0] != "~" or not (suffix[1:].isascii() and suffix[1:].isdigit()):
        return None
    return facet[:prefix_len], suffix


def try_split_date_suffix(facet: str) -> tuple[str, date | None] | None:
    """
    Split a facet into prefix and the date encoded in its suffix.

    Returns:
        (prefix, date) or None if the facet has no date-like suffix.
        date is None when the digits are not a valid calendar date.
    """
    split = try_split_date_like_suffix(facet)
    if split is None:
        return None
    prefix, suffix = split
    try:
        return prefix, datetime.strptime(suffix, DATE_SUFFIX_FORMAT).date()
    except ValueError:
        return prefix, None


def facet_with_date_suffix(prefix: str, suffix_date: date) -> str:
    """Concatenate prefix and '~yyyyMMdd'. The prefix must not end with whitespace."""
    return f"{prefix}~{suffix_date.year:04d}{suffix_date.month:02d}{suffix_date.day:02d}"
