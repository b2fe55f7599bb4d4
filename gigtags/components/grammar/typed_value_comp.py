"""Typed interpretation of decoded terms.

Applied only on request; which facets carry timestamps or URLs is up to
the integrating application.

Supported timestamp formats (tried in order):
- 2024-07-01T22:00:00.123+02:00 / 2024-07-01T22:00:00Z
- 2024-07-01T22:00:00+0200
- 2024-07-01T22:00:00.123
- 2024-07-01T22:00:00
- 2024-07-01T22:00
- 2024-07-01 22:00:00
- 2024-07-01
- 20240701

URLs must be absolute (scheme required) and are validated with
pydantic's URL type.
"""

from __future__ import annotations

import re
from datetime import datetime

from pydantic import AnyUrl, TypeAdapter, ValidationError

from gigtags.helpers.exceptions import NotATimestampError, NotAUrlError

TIMESTAMP_FORMATS: tuple[str, ...] = (
    "%Y-%m-%dT%H:%M:%S.%f%z",
    "%Y-%m-%dT%H:%M:%S%z",
    "%Y-%m-%dT%H:%M:%S.%f",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
    "%Y%m%d",
)

# Zero-padded ASCII digits only; strptime alone also accepts "2024-7-1"
_TIMESTAMP_SHAPE = re.compile(
    r"[0-9]{8}"
    r"|[0-9]{4}-[0-9]{2}-[0-9]{2}"
    r"(?:[T ][0-9]{2}:[0-9]{2}(?::[0-9]{2}(?:\.[0-9]{1,6})?)?(?:[Zz]|[+-][0-9]{2}:?[0-9]{2})?)?"
)

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def parse_timestamp(term: str | None) -> datetime:
    """
    Parse a decoded term against TIMESTAMP_FORMATS.

    A trailing 'Z' is read as UTC. Timestamps without an offset are
    returned naive.

    Raises:
        NotATimestampError: If term is None/empty or no format matches
    """
    if not term:
        raise NotATimestampError("Tag has no term")

    if not _TIMESTAMP_SHAPE.fullmatch(term):
        msg = f"Not a supported timestamp: {term!r}"
        raise NotATimestampError(msg)

    value = term
    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"

    for fmt in TIMESTAMP_FORMATS:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue

    msg = f"Not a supported timestamp: {term!r}"
    raise NotATimestampError(msg)


def parse_url(term: str | None) -> AnyUrl:
    """
    Parse a decoded term as an absolute URL.

    Raises:
        NotAUrlError: If term is None/empty, has no scheme, an invalid
            authority or is otherwise malformed
    """
    if not term:
        raise NotAUrlError("Tag has no term")
    if term != term.strip():
        msg = f"URL must not have surrounding whitespace: {term!r}"
        raise NotAUrlError(msg)

    try:
        return _URL_ADAPTER.validate_python(term)
    except ValidationError as e:
        errors = "; ".join(str(err.get("msg", "")) for err in e.errors())
        msg = f"Not an absolute URL: {term!r} ({errors})"
        raise NotAUrlError(msg) from e
