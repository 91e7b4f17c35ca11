"""Tests for output normalization."""

from readme_sync.normalize import normalize_output


class TestNormalizeOutput:
    def test_strips_blank_edges_and_trailing_space(self):
        assert normalize_output("\n\n  hello  \nworld\n\n\n") == "  hello\nworld"

    def test_keeps_internal_blank_lines(self):
        assert normalize_output("a\n\n\nb\n") == "a\n\n\nb"

    def test_whitespace_only_lines_count_as_blank(self):
        assert normalize_output("   \n\t\nvalue\n  \t \n") == "value"

    def test_all_blank_is_empty(self):
        assert normalize_output("\n \n\t\n") == ""
        assert normalize_output("") == ""

    def test_carriage_returns_are_trimmed(self):
        assert normalize_output("one\r\ntwo\r\n") == "one\ntwo"

    def test_already_normal_is_unchanged(self):
        assert normalize_output("x = 1\ny = 2") == "x = 1\ny = 2"
