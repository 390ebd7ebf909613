"""Tests for display text helpers."""

from codeplan.utils.text_helpers import format_optional, truncate_chars


def test_truncate_chars_short_text_unchanged():
    assert truncate_chars("hello", 10) == "hello"


def test_truncate_chars_long_text():
    assert truncate_chars("abcdefghij", 4) == "abcd... (6 more chars)"


def test_format_optional():
    assert format_optional(None) == "-"
    assert format_optional(()) == "-"
    assert format_optional(["a", "b"]) == "a, b"
    assert format_optional(3) == "3"
