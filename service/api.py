"""
service/api.py
--------------
FastAPI service layer exposing the textseg primitives over REST.

Endpoints:
    GET  /health
    POST /words        { "text" }                                  →  { "words" }
    POST /paragraphs   { "text" }                                  →  { "paragraphs" }
    POST /chunks       { "text", "budget_bytes" }                  →  { "chunks", "bytes" }
    POST /parts        { "text", "n" }                             →  { "parts" }
    POST /strip        { "text", "open_marker", "close_marker" }   →  { "text" }
    POST /report       { "text", "source"?, "chunk_budget"?, "parts"? }  →  TextReport

Every call is a pure function of its request body; the service holds no
state between requests.

Run with:
    uvicorn service.api:app --host 0.0.0.0 --port 8000

Or from the project root:
    python -m uvicorn service.api:app --reload
"""

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from app import CHUNK_BUDGET, SPLIT_PARTS, TAG_CLOSE, TAG_OPEN, analyze_text
from textseg.chunker import chunk_byte_lengths, split_into_chunks
from textseg.logging_config import get_logger
from textseg.paragraph_counter import count_paragraphs
from textseg.tag_stripper import remove_tagged_regions
from textseg.word_counter import count_words
from textseg.word_splitter import split_upto_n_by_word
from validator.report_validator import ValidationError

log = get_logger(__name__)

API_VERSION = "1.0.0"


# ── Request models ─────────────────────────────────────────────────────────────

class TextRequest(BaseModel):
    """Input schema for the counting endpoints."""
    text: str


class ChunkRequest(BaseModel):
    text: str
    budget_bytes: int = CHUNK_BUDGET


class PartsRequest(BaseModel):
    text: str
    n: int = SPLIT_PARTS


class StripRequest(BaseModel):
    text: str
    open_marker: str  = TAG_OPEN
    close_marker: str = TAG_CLOSE


class ReportRequest(BaseModel):
    """Input schema for /report; markers default to the CLI configuration."""
    text: str
    source: str       = "<request>"
    chunk_budget: int = CHUNK_BUDGET
    parts: int        = SPLIT_PARTS
    open_marker: str  = TAG_OPEN
    close_marker: str = TAG_CLOSE


# ── FastAPI app ────────────────────────────────────────────────────────────────

app = FastAPI(
    title       = "textseg API",
    description = (
        "UTF-8-safe text measurement and segmentation: word and paragraph "
        "counts, byte-budgeted chunks, word-bounded parts, tag stripping."
    ),
    version = API_VERSION,
)


# ── Endpoints ──────────────────────────────────────────────────────────────────

@app.get("/health", tags=["ops"])
def health_check():
    """Liveness probe."""
    return {"status": "ok", "version": API_VERSION}


@app.post("/words", tags=["count"])
def words(request: TextRequest):
    return {"words": count_words(request.text)}


@app.post("/paragraphs", tags=["count"])
def paragraphs(request: TextRequest):
    return {"paragraphs": count_paragraphs(request.text)}


@app.post("/chunks", tags=["split"])
def chunks(request: ChunkRequest):
    """
    Byte-budgeted chunks of the text, with each chunk's UTF-8 size.

    Raises:
        422 Unprocessable Entity: if budget_bytes is not positive
    """
    try:
        pieces = split_into_chunks(request.text, request.budget_bytes)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc

    log.info("POST /chunks — %d chunk(s) at budget %d", len(pieces), request.budget_bytes)
    return {"chunks": pieces, "bytes": chunk_byte_lengths(pieces)}


@app.post("/parts", tags=["split"])
def parts(request: PartsRequest):
    """
    Up to n word-bounded parts of the text.

    Raises:
        422 Unprocessable Entity: if n is not positive
    """
    try:
        pieces = split_upto_n_by_word(request.text, request.n)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return {"parts": pieces}


@app.post("/strip", tags=["transform"])
def strip(request: StripRequest):
    return {
        "text": remove_tagged_regions(
            request.text, request.open_marker, request.close_marker
        )
    }


@app.post("/report", tags=["report"])
def report(request: ReportRequest):
    """
    Full analysis of one text as a validated TextReport.

    Raises:
        422 Unprocessable Entity:  if chunk_budget or parts is not positive
        500 Internal Server Error: if the report fails schema validation
    """
    log.info("POST /report — source='%.60s' (%d chars)", request.source, len(request.text))
    try:
        return analyze_text(
            request.text,
            source       = request.source,
            chunk_budget = request.chunk_budget,
            parts        = request.parts,
            open_marker  = request.open_marker,
            close_marker = request.close_marker,
        )
    except ValidationError as exc:
        log.error("POST /report failed — validation error: %s", exc)
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
