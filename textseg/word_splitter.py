"""
textseg/word_splitter.py
------------------------
Whole-word N-way partitioning.

Divides text into at most N contiguous parts of near-equal word count,
cutting only between words. Whitespace separating two parts is attached to
the start of the following part, so the parts concatenate back to the input
up to (but excluding) any whitespace after the final word.

Word runs are located from a whitespace bitmap computed with NumPy over the
text's codepoints; the slices are taken in codepoint space, so no UTF-8
sequence is ever cut.
"""

from typing import List, Tuple

import numpy as np

from textseg._utf8 import whitespace_mask
from textseg.logging_config import get_logger

log = get_logger(__name__)

Span = Tuple[int, int]


def word_runs(text: str) -> List[Span]:
    """
    Locates every maximal run of non-whitespace characters.

    Args:
        text: Input string.

    Returns:
        Half-open (start, end) character offsets, in order.
    """
    if not text:
        return []

    is_word = (~whitespace_mask(text)).astype(np.int8)
    # +1 where a run opens, -1 one past where it closes
    edges = np.diff(np.concatenate(([0], is_word, [0])))
    starts = np.flatnonzero(edges == 1)
    ends   = np.flatnonzero(edges == -1)
    return list(zip(starts.tolist(), ends.tolist()))


def word_run_count(text: str) -> int:
    """Number of whitespace-delimited runs (no punctuation or CJK rules)."""
    return len(word_runs(text))


def _group_bounds(total: int, parts: int) -> List[Tuple[int, int]]:
    """Inclusive (first, last) run indices for each of `parts` groups."""
    return [
        (i * total // parts, (i + 1) * total // parts - 1)
        for i in range(parts)
    ]


def split_upto_n_by_word(text: str, n: int) -> List[str]:
    """
    Splits text into at most `n` parts on word boundaries.

    Group i receives runs [i*total//parts, (i+1)*total//parts - 1], so group
    sizes differ by at most one run. The first part keeps the leading
    whitespace of the text; trailing whitespace after the final word is
    not part of any group.

    Args:
        text: Raw input text.
        n:    Maximum number of parts.

    Returns:
        min(n, word_run_count(text)) slices of `text`; an empty list when
        there are no words.

    Raises:
        ValueError: If n is not a positive integer.
    """
    if n <= 0:
        raise ValueError("n must be a positive integer.")

    runs = word_runs(text)
    total = len(runs)
    if total == 0:
        return []

    parts = min(n, total)
    result: List[str] = []
    for first, last in _group_bounds(total, parts):
        # Whitespace between the previous run and this one belongs here.
        start = runs[first - 1][1] if first > 0 else 0
        result.append(text[start:runs[last][1]])

    log.debug("Split %d word run(s) into %d part(s)", total, parts)
    return result
