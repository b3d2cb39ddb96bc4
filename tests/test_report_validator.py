"""Tests for validator.report_validator."""

import copy

import pytest

from validator.report_validator import ValidationError, _fail, validate

VALID_REPORT = {
    "source":       "doc.txt",
    "characters":   5,
    "bytes":        9,
    "words":        2,
    "paragraphs":   1,
    "chunk_budget": 6,
    "chunks": [
        {"text": "ab 你", "bytes": 6},
        {"text": "好", "bytes": 3},
    ],
    "parts": ["ab", " 你好"],
}


@pytest.fixture()
def report() -> dict:
    return copy.deepcopy(VALID_REPORT)


class TestValidate:
    def test_valid_report_passes(self, report: dict) -> None:
        assert validate(report) == VALID_REPORT

    def test_empty_text_report_passes(self, report: dict) -> None:
        report.update(characters=0, bytes=0, words=0, paragraphs=0, chunks=[], parts=[])
        assert validate(report)["chunks"] == []

    def test_missing_key(self, report: dict) -> None:
        del report["words"]
        with pytest.raises(ValidationError, match="missing required keys"):
            validate(report)

    def test_blank_source(self, report: dict) -> None:
        report["source"] = "  "
        with pytest.raises(ValidationError, match="source"):
            validate(report)

    @pytest.mark.parametrize("value", [-1, "3", 2.0, True])
    def test_counts_must_be_non_negative_integers(self, report: dict, value) -> None:
        report["words"] = value
        with pytest.raises(ValidationError, match="'words'"):
            validate(report)

    def test_budget_must_be_positive(self, report: dict) -> None:
        report["chunk_budget"] = 0
        with pytest.raises(ValidationError, match="chunk_budget"):
            validate(report)

    def test_chunk_entry_must_be_dict(self, report: dict) -> None:
        report["chunks"][0] = "ab 你"
        with pytest.raises(ValidationError, match=r"chunks\[0\] must be a dict"):
            validate(report)

    def test_chunk_size_must_match_text(self, report: dict) -> None:
        report["chunks"][1]["bytes"] = 1
        with pytest.raises(ValidationError, match=r"chunks\[1\]\['bytes'\]"):
            validate(report)

    def test_chunk_over_budget(self, report: dict) -> None:
        report["chunks"] = [{"text": "ab 你好", "bytes": 9}]
        with pytest.raises(ValidationError, match="over the 6-byte budget"):
            validate(report)

    def test_single_codepoint_may_exceed_budget(self, report: dict) -> None:
        report["chunk_budget"] = 2
        report["chunks"] = [{"text": "你", "bytes": 3}]
        assert validate(report)["chunk_budget"] == 2

    def test_parts_must_be_strings(self, report: dict) -> None:
        report["parts"] = ["ab", 3]
        with pytest.raises(ValidationError, match="parts"):
            validate(report)

    def test_validation_error_is_a_value_error(self) -> None:
        assert issubclass(ValidationError, ValueError)


def test_fail_always_raises() -> None:
    with pytest.raises(ValidationError, match="^TextReport broken$"):
        _fail("broken")
