"""
textseg/_utf8.py
----------------
Shared low-level helpers for the segmentation modules.

Keeps the encoding-boundary test, the whitespace table and the punctuation
set in one place so that every splitter and counter agrees on what a
"boundary", a "space" and a "punctuation mark" are.
"""

import re
import string
from typing import List

import numpy as np

# ── Constants ──────────────────────────────────────────────────────────────────
ENCODING = "utf-8"

# ASCII punctuation trimmed from token edges; apostrophe and hyphen stay so
# contractions and hyphenated compounds survive as one token.
TRIM_PUNCTUATION = "".join(c for c in string.punctuation if c not in "'-")

# Unicode White_Space property. Narrower than str.isspace(), which also
# accepts the U+001C..U+001F information separators.
WHITESPACE_CODEPOINTS = np.array(
    [
        *range(0x0009, 0x000E),   # tab, LF, VT, FF, CR
        0x0020, 0x0085, 0x00A0, 0x1680,
        *range(0x2000, 0x200B),   # en quad .. hair space
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    ],
    dtype=np.uint32,
)

_WHITESPACE_RUN = re.compile(
    "[" + "".join(re.escape(chr(cp)) for cp in WHITESPACE_CODEPOINTS.tolist()) + "]+"
)
# ──────────────────────────────────────────────────────────────────────────────


def is_continuation_byte(byte: int) -> bool:
    """True for 0b10xxxxxx, i.e. a byte that never starts a codepoint."""
    return byte & 0xC0 == 0x80


def is_boundary(data: bytes, index: int) -> bool:
    """
    Returns True when `index` does not fall inside a multi-byte sequence.

    Both ends of the buffer are boundaries.
    """
    if index <= 0 or index >= len(data):
        return True
    return not is_continuation_byte(data[index])


def floor_boundary(data: bytes, index: int) -> int:
    """Largest codepoint boundary <= index (steps back at most 3 bytes)."""
    index = min(index, len(data))
    while not is_boundary(data, index):
        index -= 1
    return index


def ceil_boundary(data: bytes, index: int) -> int:
    """Smallest codepoint boundary >= index."""
    index = max(index, 0)
    while not is_boundary(data, index):
        index += 1
    return index


def whitespace_mask(text: str) -> np.ndarray:
    """
    Boolean bitmap over the codepoints of `text`, True on White_Space.

    Args:
        text: Input string.

    Returns:
        1-D bool array of shape (len(text),).
    """
    codepoints = np.frombuffer(text.encode("utf-32-le"), dtype="<u4")
    return np.isin(codepoints, WHITESPACE_CODEPOINTS)


def split_whitespace(text: str) -> List[str]:
    """Splits on runs of White_Space, dropping empty tokens."""
    return [token for token in _WHITESPACE_RUN.split(text) if token]
