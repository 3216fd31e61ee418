"""Unit tests for icalviewer_lite.calendar.lite_line_unfolder."""

import pytest

from icalviewer_lite.calendar.lite_line_unfolder import iter_physical_lines, unfold_lines

pytestmark = pytest.mark.unit


class TestIterPhysicalLines:
    """Tests for line-ending normalization."""

    def test_crlf_and_lf_are_equivalent(self):
        """Mixed CRLF/LF content splits into the same lines."""
        assert list(iter_physical_lines("A:1\r\nB:2\nC:3")) == ["A:1", "B:2", "C:3"]

    def test_trailing_newline_yields_empty_last_line(self):
        assert list(iter_physical_lines("A:1\r\n")) == ["A:1", ""]


class TestUnfoldLines:
    """Tests for unfold_lines."""

    def test_space_continuation_joined_without_separator(self):
        """The fold marker is removed and nothing is inserted."""
        content = "SUMMARY:Quarterly plan\r\n ning review\r\n"
        assert unfold_lines(content)[0] == "SUMMARY:Quarterly planning review"

    def test_tab_continuation_joined(self):
        content = "DESCRIPTION:Bring\n\tlaptops\n"
        assert unfold_lines(content)[0] == "DESCRIPTION:Bringlaptops"

    def test_only_first_whitespace_char_removed(self):
        """Additional leading whitespace belongs to the value."""
        content = "SUMMARY:Hello\r\n  world"
        assert unfold_lines(content) == ["SUMMARY:Hello world"]

    def test_multiple_continuations(self):
        content = "DESCRIPTION:a\n b\n c\nEND:VEVENT"
        assert unfold_lines(content) == ["DESCRIPTION:abc", "END:VEVENT"]

    def test_lf_folded_matches_crlf_folded(self):
        crlf = "SUMMARY:Long\r\n  title\r\nEND:VEVENT"
        lf = "SUMMARY:Long\n  title\nEND:VEVENT"
        assert unfold_lines(crlf) == unfold_lines(lf)

    def test_folded_document_matches_unbroken_document(self):
        """Unfolding a folded line yields the same sequence as the unbroken line."""
        folded = "BEGIN:VEVENT\r\nSUMMARY:Design review for the\r\n  new calendar view\r\nEND:VEVENT"
        unbroken = "BEGIN:VEVENT\r\nSUMMARY:Design review for the new calendar view\r\nEND:VEVENT"
        assert unfold_lines(folded) == unfold_lines(unbroken)

    def test_leading_continuation_without_previous_line_kept(self):
        assert unfold_lines(" orphan\nA:1") == [" orphan", "A:1"]

    def test_empty_document(self):
        assert unfold_lines("") == [""]
