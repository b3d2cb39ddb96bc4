"""
app.py
------
Orchestration layer for the textseg toolkit.

Runs every segmentation primitive over one text and assembles the results
into a schema-validated TextReport:

    text → remove_tagged_regions() → count_words()
                                    → count_paragraphs()
                                    → split_into_chunks()
                                    → split_upto_n_by_word()  → validate() → TextReport

Directory mode walks DATA_DIR (or a given directory), analyses every .txt
file independently, and reports each one under its filename.

Run with:
    python app.py                 # every .txt under data/
    python app.py path/to/file.txt
    python app.py path/to/dir/
"""

import json
import sys
from pathlib import Path
from typing import List

from textseg.chunker import chunk_byte_lengths, split_into_chunks
from textseg.logging_config import get_logger
from textseg.paragraph_counter import count_paragraphs
from textseg.tag_stripper import remove_tagged_regions
from textseg.word_counter import count_words
from textseg.word_splitter import split_upto_n_by_word
from validator.report_validator import TextReport, ValidationError, validate

log = get_logger(__name__)

# ── Configuration ───────────────────────────────────────────────────────────────

DATA_DIR     = Path(__file__).parent / "data"
CHUNK_BUDGET = 1024
SPLIT_PARTS  = 4
TAG_OPEN     = "<!--"
TAG_CLOSE    = "-->"


# ── Single text ─────────────────────────────────────────────────────────────────

def analyze_text(
    text: str,
    source: str       = "<text>",
    chunk_budget: int = CHUNK_BUDGET,
    parts: int        = SPLIT_PARTS,
    open_marker: str  = TAG_OPEN,
    close_marker: str = TAG_CLOSE,
) -> TextReport:
    """
    Measures and partitions one text.

    Tagged regions are stripped first, so comments or annotations never
    count toward words, paragraphs or chunk budgets. Pass an empty marker to
    skip stripping.

    Args:
        text:         Raw input text.
        source:       Label recorded in the report (e.g. a filename).
        chunk_budget: Byte budget for split_into_chunks().
        parts:        Maximum part count for split_upto_n_by_word().
        open_marker:  Literal string opening a region to strip.
        close_marker: Literal string closing a region to strip.

    Returns:
        A validated TextReport.

    Raises:
        ValueError:      If chunk_budget or parts is not positive.
        ValidationError: If the assembled report fails schema validation.
    """
    if open_marker and close_marker:
        text = remove_tagged_regions(text, open_marker, close_marker)

    chunks = split_into_chunks(text, chunk_budget)
    raw_report = {
        "source":       source,
        "characters":   len(text),
        "bytes":        len(text.encode("utf-8")),
        "words":        count_words(text),
        "paragraphs":   count_paragraphs(text),
        "chunk_budget": chunk_budget,
        "chunks": [
            {"text": chunk, "bytes": size}
            for chunk, size in zip(chunks, chunk_byte_lengths(chunks))
        ],
        "parts":        split_upto_n_by_word(text, parts),
    }
    return validate(raw_report)


# ── Directory ───────────────────────────────────────────────────────────────────

def analyze_directory(
    data_dir: Path    = DATA_DIR,
    chunk_budget: int = CHUNK_BUDGET,
    parts: int        = SPLIT_PARTS,
) -> List[TextReport]:
    """
    Analyses every .txt file in data_dir, in filename order.

    Args:
        data_dir:     Directory containing .txt documents.
        chunk_budget: Byte budget for split_into_chunks().
        parts:        Maximum part count for split_upto_n_by_word().

    Returns:
        One TextReport per file.

    Raises:
        FileNotFoundError: If data_dir does not exist or contains no .txt files.
    """
    txt_files = sorted(Path(data_dir).glob("*.txt"))
    if not txt_files:
        raise FileNotFoundError(f"No .txt files found in {data_dir}.")

    reports: List[TextReport] = []
    for filepath in txt_files:
        report = analyze_text(
            filepath.read_text(encoding="utf-8"),
            source       = filepath.name,
            chunk_budget = chunk_budget,
            parts        = parts,
        )
        log.info("%s → %d words, %d paragraphs, %d chunks",
                 filepath.name, report["words"], report["paragraphs"],
                 len(report["chunks"]))
        reports.append(report)

    return reports


def main(argv: List[str]) -> int:
    target = Path(argv[1]) if len(argv) > 1 else DATA_DIR

    try:
        if target.is_file():
            reports = [analyze_text(target.read_text(encoding="utf-8"), source=target.name)]
        else:
            reports = analyze_directory(target)
    except FileNotFoundError as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        print(f"[VALIDATION ERROR] {exc}", file=sys.stderr)
        return 2

    print(json.dumps(reports, indent=2, ensure_ascii=False))
    return 0


# ── Entry point ─────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    sys.exit(main(sys.argv))
