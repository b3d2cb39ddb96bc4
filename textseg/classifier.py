"""
textseg/classifier.py
---------------------
Codepoint classification shared by the counters.

A codepoint is either a CJK ideograph (Chinese/Japanese/Korean Han
characters, counted one word per character) or anything else. Membership is
a fixed table of Unicode block ranges; kana, hangul, CJK punctuation and
emoji are deliberately outside it.
"""

from enum import Enum
from typing import Tuple, Union


class CodepointClass(Enum):
    """Result of `classify()`."""
    CJK   = "cjk"
    OTHER = "other"


# ── Block table (inclusive ranges) ─────────────────────────────────────────────
CJK_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x4E00,  0x9FFF),    # CJK Unified Ideographs
    (0x3400,  0x4DBF),    # Extension A
    (0x20000, 0x2A6DF),   # Extension B
    (0x2A700, 0x2B73F),   # Extension C
    (0x2B740, 0x2B81F),   # Extension D
    (0x2B820, 0x2CEAF),   # Extension E
    (0xF900,  0xFAFF),    # Compatibility Ideographs
    (0x2F800, 0x2FA1F),   # Compatibility Ideographs Supplement
)
# ──────────────────────────────────────────────────────────────────────────────


def classify(codepoint: Union[int, str]) -> CodepointClass:
    """
    Classifies a single codepoint.

    Args:
        codepoint: Integer scalar value or a one-character string.

    Returns:
        CodepointClass.CJK for a CJK ideograph, CodepointClass.OTHER otherwise.

    Raises:
        TypeError: If a string of length other than one is given.
    """
    if isinstance(codepoint, str):
        codepoint = ord(codepoint)
    for low, high in CJK_RANGES:
        if low <= codepoint <= high:
            return CodepointClass.CJK
    return CodepointClass.OTHER


def is_cjk(ch: Union[int, str]) -> bool:
    return classify(ch) is CodepointClass.CJK
