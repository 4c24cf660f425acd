"""Utility functions for Inkpot.

Key functions:
    post_id_from_filename: Derive a post identifier from a file name.
    post_filename: Build the file name for a post identifier.
    validate_post_id: Reject identifiers that would escape the posts directory.
    date_sort_key: Normalize a front matter date for ordering.
"""

from __future__ import annotations

import os
import re
from datetime import date, datetime, time, timezone
from typing import Any

from .errors import InvalidIdentifierError

MARKDOWN_SUFFIX = ".md"
MARKDOWN_SUFFIX_RE = re.compile(r"\.md\Z")


def post_id_from_filename(name: str) -> str:
    """Strip a single trailing ``.md`` suffix from a file name.

    Names without the suffix are returned unchanged.

    Examples:
        >>> post_id_from_filename("ssg-ssr.md")
        'ssg-ssr'

        >>> post_id_from_filename("notes.txt")
        'notes.txt'
    """
    return MARKDOWN_SUFFIX_RE.sub("", name, count=1)


def post_filename(post_id: str) -> str:
    return f"{post_id}{MARKDOWN_SUFFIX}"


def validate_post_id(post_id: str) -> str:
    """Check that a post identifier names a file directly in the posts directory.

    Args:
        post_id: Identifier requested by the caller.

    Returns:
        The identifier, unchanged.

    Raises:
        InvalidIdentifierError: If the identifier is empty, is ``.`` or
            ``..``, or contains a path separator or NUL byte.
    """
    if not isinstance(post_id, str) or not post_id:
        raise InvalidIdentifierError(str(post_id), "must be a non-empty string")
    if post_id in (".", ".."):
        raise InvalidIdentifierError(post_id, "must not be a relative path")
    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in post_id for sep in separators):
        raise InvalidIdentifierError(post_id, "must not contain path separators")
    if "\x00" in post_id:
        raise InvalidIdentifierError(post_id, "must not contain NUL bytes")
    return post_id


def date_sort_key(value: Any) -> str | None:
    """Normalize a front matter ``date`` value to a comparable string.

    YAML turns unquoted dates into ``date``/``datetime`` objects while quoted
    ones stay strings. Date objects are reduced to the UTC instant they name
    (naive values are taken as UTC, a bare date as midnight) and compared
    through their ISO-8601 text; strings compare as written.

    Args:
        value: Raw front matter value.

    Returns:
        The comparison text, or None when the value is missing or empty.
    """
    if value is None:
        return None
    if isinstance(value, date):
        return _utc_instant(value).isoformat(timespec="microseconds")
    text = str(value).strip()
    return text or None


def _utc_instant(value: date) -> datetime:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.replace(tzinfo=None)
