"""
Cursor codec for paginated folder queries.

A cursor is the standard (padded) base64 encoding of ``next_cursor:<index>``.
Clients treat it as opaque.
"""

import base64
import binascii
import re

from orgfolders.constants import CURSOR_ERROR_MESSAGE, CURSOR_SEPARATOR, CURSOR_TAG
from orgfolders.exceptions import CursorDecodeError

_INDEX_PATTERN = re.compile(r"[0-9]+")


def encode_cursor(index: int) -> str:
    """
    Encode a resume position as an opaque cursor.

    Args:
        index: Position in the filtered sequence to resume from.

    Raises:
        ValueError: If index is negative or not an integer.
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise ValueError(f"Cursor index must be a non-negative integer, got {index!r}")
    raw = f"{CURSOR_TAG}{CURSOR_SEPARATOR}{index}"
    return base64.b64encode(raw.encode("utf-8")).decode("ascii")


def decode_cursor(cursor: str, strict: bool = False) -> int:
    """
    Decode a cursor produced by encode_cursor.

    An empty cursor decodes to 0. The tag before the separator is ignored
    unless ``strict`` is set, in which case it must be ``next_cursor``.

    Args:
        cursor: Opaque cursor string.
        strict: Require the literal cursor tag.

    Returns:
        The resume index.

    Raises:
        CursorDecodeError: If the cursor is not valid base64, not of the
            form ``<tag>:<index>``, or the index is not a non-negative integer.
    """
    if not cursor:
        return 0

    try:
        decoded = base64.b64decode(cursor, validate=True).decode("utf-8")
    except (binascii.Error, ValueError) as e:
        raise CursorDecodeError(CURSOR_ERROR_MESSAGE) from e

    parts = decoded.split(CURSOR_SEPARATOR)
    if len(parts) != 2:
        raise CursorDecodeError(CURSOR_ERROR_MESSAGE)

    tag, index = parts
    if strict and tag != CURSOR_TAG:
        raise CursorDecodeError(CURSOR_ERROR_MESSAGE)
    if not _INDEX_PATTERN.fullmatch(index):
        raise CursorDecodeError(CURSOR_ERROR_MESSAGE)

    try:
        return int(index)
    except ValueError as e:
        # digit runs past the interpreter's int conversion limit
        raise CursorDecodeError(CURSOR_ERROR_MESSAGE) from e
