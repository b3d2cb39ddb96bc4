"""
textseg/paragraph_counter.py
----------------------------
Paragraph counting over plain text.

Every newline sequence (\\r\\n, \\n or a bare \\r) ends a paragraph, and
consecutive newlines produce empty paragraphs that still count. A text that
opens with a newline gets no implicit paragraph in front of that first
break, so "\\nA" is one paragraph while "A\\n" is two.
"""

_NEWLINE = "\n"


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", _NEWLINE).replace("\r", _NEWLINE)


def count_paragraphs(text: str) -> int:
    """
    Counts paragraphs in `text`.

    Args:
        text: Input string.

    Returns:
        0 for an empty string, 1 when there is no newline, otherwise the
        number of newline markers, plus one unless the text starts with one.
    """
    if not text:
        return 0

    normalized = normalize_newlines(text)
    newline_count = normalized.count(_NEWLINE)

    if newline_count == 0:
        return 1

    # No implicit paragraph before a leading break.
    if normalized.startswith(_NEWLINE):
        return newline_count

    return newline_count + 1
