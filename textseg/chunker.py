"""
textseg/chunker.py
------------------
Byte-budgeted segmentation that never splits a UTF-8 sequence.

Partitions text into consecutive pieces whose encoded size fits a byte
budget (an API payload limit, a database column, a message frame). Each cut
is moved back to the nearest codepoint boundary, so every chunk decodes on
its own and the chunks concatenate back to the exact input.
"""

from typing import Iterable, List

from textseg._utf8 import ENCODING, ceil_boundary, floor_boundary
from textseg.logging_config import get_logger

log = get_logger(__name__)


def split_into_chunks(text: str, budget_bytes: int) -> List[str]:
    """
    Splits text into chunks of at most `budget_bytes` encoded bytes.

    A chunk only exceeds the budget when the budget is narrower than the
    single codepoint at the cut (e.g. a budget of 2 before a 4-byte emoji):
    that codepoint is emitted alone so the split always advances.

    Args:
        text:         Raw input text.
        budget_bytes: Maximum UTF-8 size of each chunk.

    Returns:
        Non-empty chunks in order; an empty list for empty input.

    Raises:
        ValueError: If budget_bytes is not a positive integer.
    """
    if budget_bytes <= 0:
        raise ValueError("budget_bytes must be a positive integer.")
    if not text:
        return []

    data = text.encode(ENCODING)
    length = len(data)
    chunks: List[str] = []
    offset = 0

    while offset < length:
        end = floor_boundary(data, min(offset + budget_bytes, length))
        if end <= offset:
            end = ceil_boundary(data, offset + 1)
        chunks.append(data[offset:end].decode(ENCODING))
        offset = end

    log.debug("Split %d bytes into %d chunk(s) of <= %d bytes",
              length, len(chunks), budget_bytes)
    return chunks


def chunk_byte_lengths(chunks: Iterable[str]) -> List[int]:
    """Encoded size of each chunk, in order."""
    return [len(chunk.encode(ENCODING)) for chunk in chunks]
