"""
textseg/tag_stripper.py
-----------------------
Removal of marker-delimited regions, with nesting.

Everything between an open marker and its matching close marker (markers
included) is dropped; nested open markers must each be closed before the
outer region ends. An open marker that is never closed drops the rest of
the text. Markers are literal strings, not patterns.

Edge policies:
  - empty open marker: matches at the first position, result is "".
  - empty close marker: matches right after each open marker, so only the
    open markers themselves are removed.
  - a close marker outside any region is ordinary text.
"""

from typing import List

from textseg.logging_config import get_logger

log = get_logger(__name__)


def _skip_region(text: str, pos: int, open_marker: str, close_marker: str) -> int:
    """
    Consumes a region whose open marker ends at `pos`.

    Returns:
        Index just past the matching close marker, or -1 if the region is
        never closed.
    """
    depth = 1
    # Cached match positions; a search only reruns once `pos` has passed
    # the cached hit, and -1 for the open marker means none remain.
    next_open  = text.find(open_marker, pos)
    next_close = text.find(close_marker, pos)
    while depth:
        if next_open != -1 and next_open < pos:
            next_open = text.find(open_marker, pos)
        if next_close != -1 and next_close < pos:
            next_close = text.find(close_marker, pos)
        if next_close == -1:
            return -1
        # At equal positions the open marker is tested first.
        if next_open != -1 and next_open <= next_close:
            depth += 1
            pos = next_open + len(open_marker)
        else:
            depth -= 1
            pos = next_close + len(close_marker)
    return pos


def remove_tagged_regions(text: str, open_marker: str, close_marker: str) -> str:
    """
    Returns `text` with every open/close marker region removed.

    Examples:
        >>> remove_tagged_regions("Hello <t>secret</t> world", "<t>", "</t>")
        'Hello  world'
        >>> remove_tagged_regions("before <t>unfinished", "<t>", "</t>")
        'before '

    Args:
        text:         Input string.
        open_marker:  Literal string opening a region.
        close_marker: Literal string closing a region.

    Returns:
        The text outside all regions, in order.
    """
    if not open_marker:
        return ""

    pieces: List[str] = []
    pos = 0

    while pos < len(text):
        start = text.find(open_marker, pos)
        if start == -1:
            pieces.append(text[pos:])
            break
        pieces.append(text[pos:start])
        pos = _skip_region(text, start + len(open_marker), open_marker, close_marker)
        if pos == -1:
            log.debug("Unmatched %r at offset %d — dropping the remainder",
                      open_marker, start)
            break

    return "".join(pieces)
