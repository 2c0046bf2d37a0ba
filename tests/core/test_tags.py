"""
Tests for vstoolsets.core.tags module.
"""

import pytest

from vstoolsets.core.exceptions import ReportFormatError
from vstoolsets.core.tags import (
    find_all_enclosed,
    find_at_most_one_enclosed,
    find_exactly_one_enclosed,
)


class TestFindAllEnclosed:
    """Tests for find_all_enclosed."""

    def test_multiple_blocks(self):
        """Test every disjoint block is returned in order."""
        text = "<i>one</i> noise <i>two</i>\n<i>three</i>"

        assert find_all_enclosed(text, "<i>", "</i>") == ["one", "two", "three"]

    def test_no_match(self):
        """Test text without markers yields nothing."""
        assert find_all_enclosed("plain text", "<i>", "</i>") == []

    def test_empty_span(self):
        """Test adjacent markers yield an empty span."""
        assert find_all_enclosed("<i></i>", "<i>", "</i>") == [""]

    def test_unterminated_block_ends_scan(self):
        """Test an opening marker without closing marker is ignored."""
        text = "<i>one</i><i>dangling"

        assert find_all_enclosed(text, "<i>", "</i>") == ["one"]

    def test_nested_markers_not_parsed(self):
        """Test spans are matched textually, not as a tree."""
        text = "<instance><instance>inner</instance></instance>"

        result = find_all_enclosed(text, "<instance>", "</instance>")

        assert result == ["<instance>inner"]

    def test_multiline_span_preserved(self):
        """Test whitespace inside the span is kept verbatim."""
        text = "<instance>\n  <a>1</a>\n</instance>"

        assert find_all_enclosed(text, "<instance>", "</instance>") == [
            "\n  <a>1</a>\n"
        ]


class TestFindAtMostOneEnclosed:
    """Tests for find_at_most_one_enclosed."""

    def test_absent_returns_none(self):
        """Test missing field returns None."""
        assert find_at_most_one_enclosed("<a>1</a>", "<b>", "</b>") is None

    def test_single_match(self):
        """Test single match is returned."""
        assert find_at_most_one_enclosed("<b>0</b>", "<b>", "</b>") == "0"

    def test_duplicate_raises(self):
        """Test more than one match is a structural error."""
        with pytest.raises(ReportFormatError):
            find_at_most_one_enclosed("<b>0</b><b>1</b>", "<b>", "</b>")


class TestFindExactlyOneEnclosed:
    """Tests for find_exactly_one_enclosed."""

    def test_single_match(self):
        """Test single match is returned."""
        text = "<installationPath>C:\\VS</installationPath>"

        result = find_exactly_one_enclosed(
            text, "<installationPath>", "</installationPath>"
        )

        assert result == "C:\\VS"

    def test_missing_raises(self):
        """Test missing field is a structural error."""
        with pytest.raises(ReportFormatError, match="exactly one"):
            find_exactly_one_enclosed("<a>1</a>", "<b>", "</b>")

    def test_duplicate_raises(self):
        """Test duplicated field is a structural error."""
        with pytest.raises(ReportFormatError, match="found 2"):
            find_exactly_one_enclosed("<b>1</b><b>2</b>", "<b>", "</b>")
