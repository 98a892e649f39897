"""
Tests for the pagination cursor codec.

Tests cover:
- Wire format of encoded cursors
- Decoding of encoded cursors and the empty cursor
- Rejection of malformed cursors with an opaque error message
- Optional strict tag checking
"""

import base64

import pytest

from orgfolders.exceptions import CursorDecodeError
from orgfolders.managers.cursor import decode_cursor, encode_cursor


class TestEncodeCursor:
    """Test cursor encoding."""

    def test_encode_matches_wire_format(self):
        """Cursor is padded standard base64 of next_cursor:<index>."""
        assert encode_cursor(5) == "bmV4dF9jdXJzb3I6NQ=="
        assert encode_cursor(12) == "bmV4dF9jdXJzb3I6MTI="

    def test_encode_zero(self):
        assert encode_cursor(0) == "bmV4dF9jdXJzb3I6MA=="

    @pytest.mark.parametrize("index", [-1, 1.5, "3", None, True])
    def test_encode_rejects_non_index_values(self, index):
        """Only non-negative integers can be encoded."""
        with pytest.raises(ValueError):
            encode_cursor(index)


class TestDecodeCursor:
    """Test cursor decoding."""

    @pytest.mark.parametrize("index", [0, 1, 5, 99, 100, 12345678901234567890])
    def test_decode_returns_encoded_index(self, index):
        assert decode_cursor(encode_cursor(index)) == index

    def test_decode_empty_cursor_is_zero(self):
        """Empty cursor means start from the beginning."""
        assert decode_cursor("") == 0

    def test_decode_ignores_tag_by_default(self):
        """Any tag before the separator is accepted unless strict."""
        assert decode_cursor("b3RoZXJfdGFnOjU=") == 5

    @pytest.mark.parametrize(
        "cursor",
        [
            "invalidToken",              # decodes, but not to UTF-8 text
            "invalid_cursor",            # '_' is outside the base64 alphabet
            "ThisIsNotBase64!",
            "bmV4dF9jdXJzb3I6NQ",        # missing padding
            "bmV4dF9jdXJzb3I=",          # next_cursor (no separator)
            "YTpiOmM=",                  # a:b:c
            "bmV4dF9jdXJzb3I6LTE=",      # next_cursor:-1
            "bmV4dF9jdXJzb3I6YWJj",      # next_cursor:abc
            "bmV4dF9jdXJzb3I6MV8w",      # next_cursor:1_0
            "bmV4dF9jdXJzb3I6IDU=",      # next_cursor: 5
        ],
    )
    def test_decode_rejects_malformed_cursor(self, cursor):
        with pytest.raises(CursorDecodeError):
            decode_cursor(cursor)

    def test_decode_rejects_oversized_index(self):
        """An index too long to convert is a decode error, not a ValueError."""
        cursor = base64.b64encode(("next_cursor:" + "9" * 5000).encode()).decode()

        with pytest.raises(CursorDecodeError) as exc_info:
            decode_cursor(cursor)

        assert str(exc_info.value) == "invalid cursor"

    def test_decode_error_does_not_leak_internals(self):
        """The error message stays opaque whatever the failure."""
        for cursor in ("invalid_cursor", "bmV4dF9jdXJzb3I6YWJj", "YTpiOmM="):
            with pytest.raises(CursorDecodeError) as exc_info:
                decode_cursor(cursor)
            assert str(exc_info.value) == "invalid cursor"


class TestStrictCursorTag:
    """Test strict tag validation."""

    def test_strict_accepts_encoded_cursor(self):
        assert decode_cursor(encode_cursor(7), strict=True) == 7

    def test_strict_rejects_foreign_tag(self):
        with pytest.raises(CursorDecodeError):
            decode_cursor("b3RoZXJfdGFnOjU=", strict=True)

    def test_strict_empty_cursor_is_zero(self):
        assert decode_cursor("", strict=True) == 0
