"""Unit tests for icalviewer_lite.calendar.lite_text_decoder."""

import pytest

from icalviewer_lite.calendar.lite_text_decoder import decode_text

pytestmark = pytest.mark.unit


class TestDecodeText:
    """Tests for decode_text."""

    def test_comma_and_semicolon(self):
        assert decode_text("A\\, B\\; C") == "A, B; C"

    def test_newline(self):
        assert decode_text("line1\\nline2") == "line1\nline2"

    def test_backslash(self):
        assert decode_text("back\\\\slash") == "back\\slash"

    def test_escaped_backslash_before_n_is_not_newline(self):
        """``\\\\n`` is an escaped backslash followed by a literal n."""
        assert decode_text("C:\\\\new") == "C:\\new"

    def test_escaped_backslash_then_escaped_comma(self):
        assert decode_text("a\\\\\\,b") == "a\\,b"

    def test_unknown_escape_kept_literally(self):
        assert decode_text("tab\\there") == "tab\\there"

    def test_uppercase_n_not_an_escape(self):
        assert decode_text("x\\Ny") == "x\\Ny"

    def test_trailing_lone_backslash_kept(self):
        assert decode_text("ends with\\") == "ends with\\"

    def test_plain_text_unchanged(self):
        assert decode_text("Room 4") == "Room 4"

    def test_empty(self):
        assert decode_text("") == ""
