# tests/unit/test_text.py
"""Tests for truncate_text()."""

from app.utils.text import truncate_text


class TestTruncateText:
    def test_within_limit_returned_as_is(self):
        assert truncate_text("hello", 10) == "hello"

    def test_exactly_at_limit(self):
        assert truncate_text("hello", 5) == "hello"

    def test_hard_cut_without_spaces(self):
        assert truncate_text("abcdefghij", 4) == "abcd"

    def test_backs_off_to_word_boundary_near_end(self):
        text = "The quick brown fox jumps"
        # window "The quick brown fox ju" -> last space at 19, inside final fifth of 22
        assert truncate_text(text, 22) == "The quick brown fox"

    def test_ignores_word_boundary_far_from_end(self):
        text = "a " + "b" * 50
        assert truncate_text(text, 20) == "a " + "b" * 18

    def test_strips_trailing_whitespace(self):
        assert truncate_text("abc      defghijklmnop", 7) == "abc"

    def test_result_never_exceeds_limit(self):
        text = "lorem ipsum dolor sit amet " * 40
        for limit in (1, 7, 50, 399, 400):
            assert len(truncate_text(text, limit)) <= limit

    def test_non_positive_limit(self):
        assert truncate_text("abc", 0) == ""
        assert truncate_text("", 0) == ""

    def test_unicode_counts_characters(self):
        assert truncate_text("ééééé", 3) == "ééé"
