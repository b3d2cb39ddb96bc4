"""Tests for textseg.paragraph_counter."""

import pytest

from textseg.paragraph_counter import count_paragraphs, normalize_newlines


class TestCountParagraphs:
    def test_empty_document(self) -> None:
        assert count_paragraphs("") == 0

    def test_single_paragraph_no_newline(self) -> None:
        assert count_paragraphs("Hello world") == 1
        assert count_paragraphs("   ") == 1

    @pytest.mark.parametrize("text", ["Hello\nWorld", "Hello\r\nWorld", "Hello\rWorld"])
    def test_two_paragraphs_any_newline_style(self, text: str) -> None:
        assert count_paragraphs(text) == 2

    @pytest.mark.parametrize("text", ["\n", "\r", "\r\n"])
    def test_lone_newline_is_one_empty_paragraph(self, text: str) -> None:
        assert count_paragraphs(text) == 1

    def test_trailing_newline_creates_empty_paragraph(self) -> None:
        assert count_paragraphs("Hello\n") == 2
        assert count_paragraphs("Hello\r\n") == 2

    def test_leading_newline_adds_no_paragraph(self) -> None:
        assert count_paragraphs("\nHello") == 1
        assert count_paragraphs("\n\nHello") == 2
        assert count_paragraphs("\r\nHello\nWorld") == 2

    def test_multiple_empty_paragraphs(self) -> None:
        assert count_paragraphs("A\n\nB") == 3
        assert count_paragraphs("A\n\n\nB") == 4

    def test_whitespace_only_lines_count(self) -> None:
        assert count_paragraphs("A\n   \nB") == 3

    def test_mixed_newline_types(self) -> None:
        assert count_paragraphs("A\r\nB\nC\rD") == 4

    def test_cr_lf_pair_is_one_break(self) -> None:
        # "\n\r" is two breaks, "\r\n" is one
        assert count_paragraphs("A\r\nB") == 2
        assert count_paragraphs("A\n\rB") == 3


def test_normalize_newlines() -> None:
    assert normalize_newlines("a\r\nb\rc\nd") == "a\nb\nc\nd"
