"""
validator/report_validator.py
-----------------------------
Output schema enforcement for text analysis reports.

Defines the canonical TextReport TypedDict and validates analysis output
against it before it is returned to the CLI, the REST service or the
browser inspector. Raises a typed ValidationError on any schema violation.

Besides key and type checks, the validator re-checks the segmentation
invariants a consumer relies on: chunk sizes are reported honestly and
never exceed the budget unless a single codepoint is wider than it.
"""

from typing import Any, Dict, List, NoReturn

from typing_extensions import TypedDict

from textseg.logging_config import get_logger

log = get_logger(__name__)


# ── Schema definition ──────────────────────────────────────────────────────────

class ChunkEntry(TypedDict):
    """One byte-budgeted chunk."""
    text:  str   # chunk content
    bytes: int   # UTF-8 size of `text`


class TextReport(TypedDict):
    """Canonical output contract for a single analysed text."""
    source:       str               # filename or caller-supplied label
    characters:   int               # codepoint count of the analysed text
    bytes:        int               # UTF-8 size of the analysed text
    words:        int               # count_words()
    paragraphs:   int               # count_paragraphs()
    chunk_budget: int               # budget passed to split_into_chunks()
    chunks:       List[ChunkEntry]  # split_into_chunks() output
    parts:        List[str]         # split_upto_n_by_word() output


# ── Custom exception ───────────────────────────────────────────────────────────

class ValidationError(ValueError):
    """Raised when a TextReport fails schema validation."""


# ── Validators ─────────────────────────────────────────────────────────────────

_COUNT_KEYS = ("characters", "bytes", "words", "paragraphs")


def _fail(message: str) -> NoReturn:
    log.error("Validation failed — %s", message)
    raise ValidationError(f"TextReport {message}")


def _is_count(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def validate(report: Dict[str, Any]) -> TextReport:
    """
    Validates a dict against the TextReport schema.

    Checks:
      - Required keys are present
      - source is a non-empty string
      - counts are non-negative integers, chunk_budget is positive
      - chunks is a list of {text, bytes} dicts whose bytes match the text,
        and which exceed chunk_budget only for a single codepoint
      - parts is a list of strings

    Args:
        report: Dict to validate (typically the raw analysis output).

    Returns:
        The same dict cast as a typed TextReport.

    Raises:
        ValidationError: If any field is missing, wrong type, or inconsistent.
    """
    missing = set(TextReport.__annotations__) - report.keys()
    if missing:
        _fail(f"missing required keys: {sorted(missing)}")

    if not isinstance(report["source"], str) or not report["source"].strip():
        _fail("field 'source' must be a non-empty string.")

    for key in _COUNT_KEYS:
        if not _is_count(report[key]):
            _fail(f"field '{key}' must be a non-negative integer.")

    budget = report["chunk_budget"]
    if not _is_count(budget) or budget == 0:
        _fail("field 'chunk_budget' must be a positive integer.")

    if not isinstance(report["chunks"], list):
        _fail("'chunks' must be a list.")

    for i, entry in enumerate(report["chunks"]):
        if not isinstance(entry, dict):
            _fail(f"chunks[{i}] must be a dict, got {type(entry).__name__}.")
        text = entry.get("text")
        if not isinstance(text, str) or not text:
            _fail(f"chunks[{i}]['text'] must be a non-empty string.")
        size = len(text.encode("utf-8"))
        if entry.get("bytes") != size:
            _fail(f"chunks[{i}]['bytes'] is {entry.get('bytes')!r}, expected {size}.")
        if size > budget and len(text) > 1:
            _fail(f"chunks[{i}] is {size} bytes, over the {budget}-byte budget.")

    if not isinstance(report["parts"], list) or not all(
        isinstance(part, str) for part in report["parts"]
    ):
        _fail("'parts' must be a list of strings.")

    log.debug(
        "Validation succeeded — source='%.60s' chunks=%d parts=%d",
        report["source"], len(report["chunks"]), len(report["parts"]),
    )
    return TextReport(**report)  # type: ignore[typeddict-item]
