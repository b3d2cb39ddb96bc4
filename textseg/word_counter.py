"""
textseg/word_counter.py
-----------------------
Word counting with document-editor heuristics rather than a bare split.

Rules:
  - Tokens are separated by Unicode White_Space; runs of spaces, tabs
    and newlines never produce empty words.
  - Leading/trailing ASCII punctuation is ignored ("hello," → hello), except
    apostrophe and hyphen.
  - Hyphenated compounds, contractions, URLs and emoji count as one word.
  - A token made only of CJK ideographs counts one word per character.
"""

from textseg._utf8 import TRIM_PUNCTUATION, split_whitespace
from textseg.classifier import is_cjk


def count_words(text: str) -> int:
    """
    Counts the words in `text`.

    Examples:
        >>> count_words("Hello, world!")
        2
        >>> count_words("state-of-the-art")
        1
        >>> count_words("你好世界")
        4

    Args:
        text: Input string.

    Returns:
        Non-negative word count; 0 for empty or whitespace-only input.
    """
    count = 0

    for token in split_whitespace(text):
        trimmed = token.strip(TRIM_PUNCTUATION)
        if not trimmed:
            continue

        if all(is_cjk(ch) for ch in trimmed):
            count += len(trimmed)
            continue

        count += 1

    return count
