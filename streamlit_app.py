"""
streamlit_app.py
----------------
Browser front-end for the textseg toolkit.
Wraps analyze_text() from app.py.

Run with:
    streamlit run streamlit_app.py
"""

import sys
from pathlib import Path

import streamlit as st

# Make project root importable
sys.path.insert(0, str(Path(__file__).parent))

from app import CHUNK_BUDGET, DATA_DIR, SPLIT_PARTS, TAG_CLOSE, TAG_OPEN, analyze_text
from validator.report_validator import ValidationError

# ── Page config ────────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="textseg inspector",
    page_icon="✂️",
    layout="centered",
)

# ── Sidebar ────────────────────────────────────────────────────────────────────

with st.sidebar:
    st.header("⚙️ Configuration")
    chunk_budget = st.number_input("Chunk budget (bytes)", min_value=1, value=CHUNK_BUDGET)
    parts        = st.slider("Word-bounded parts", min_value=1, max_value=16, value=SPLIT_PARTS)
    open_marker  = st.text_input("Open marker", value=TAG_OPEN)
    close_marker = st.text_input("Close marker", value=TAG_CLOSE)
    st.caption("Leave a marker empty to skip tag stripping.")

# ── Sample text (cached so it is read once) ────────────────────────────────────

@st.cache_data
def load_sample(data_dir: str) -> str:
    """Returns the first .txt file under data_dir, or an empty string."""
    txt_files = sorted(Path(data_dir).glob("*.txt"))
    return txt_files[0].read_text(encoding="utf-8") if txt_files else ""

# ── Main UI ────────────────────────────────────────────────────────────────────

st.title("✂️ textseg inspector")
st.caption("UTF-8-safe word counts, paragraph counts and text splitting")

text = st.text_area("Text", value=load_sample(str(DATA_DIR)), height=240)

if st.button("Analyse", type="primary"):
    try:
        report = analyze_text(
            text,
            source       = "<inspector>",
            chunk_budget = int(chunk_budget),
            parts        = parts,
            open_marker  = open_marker,
            close_marker = close_marker,
        )
    except ValidationError as exc:
        st.error(f"**Validation error:** {exc}")
        st.stop()

    # ── Counts ───────────────────────────────────────────────────────
    col1, col2, col3 = st.columns(3)
    col1.metric("Words", report["words"])
    col2.metric("Paragraphs", report["paragraphs"])
    col3.metric("Bytes", report["bytes"])

    # ── Chunks ───────────────────────────────────────────────────────
    st.subheader(f"Chunks — {len(report['chunks'])} at {report['chunk_budget']} bytes")
    for i, chunk in enumerate(report["chunks"], start=1):
        with st.expander(f"Chunk {i} — {chunk['bytes']} bytes", expanded=(i == 1)):
            st.text(chunk["text"])

    # ── Parts ────────────────────────────────────────────────────────
    st.subheader(f"Word-bounded parts — {len(report['parts'])}")
    for i, part in enumerate(report["parts"], start=1):
        with st.expander(f"Part {i}", expanded=False):
            st.text(part)
