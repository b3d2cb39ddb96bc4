"""Tests for textseg.tag_stripper."""

import time

import pytest

from textseg.tag_stripper import remove_tagged_regions


class TestRemoveTaggedRegions:
    def test_single_region(self) -> None:
        assert remove_tagged_regions("Hello <t>secret</t> world", "<t>", "</t>") == "Hello  world"

    def test_unmatched_open_drops_remainder(self) -> None:
        assert remove_tagged_regions("before <t>unfinished", "<t>", "</t>") == "before "

    def test_multiple_regions(self) -> None:
        assert remove_tagged_regions("x<t>1</t>y<t>2</t>z", "<t>", "</t>") == "xyz"

    def test_nested_regions(self) -> None:
        assert remove_tagged_regions("a<t>b<t>c</t>d</t>e", "<t>", "</t>") == "ae"

    def test_nested_region_left_open_drops_remainder(self) -> None:
        assert remove_tagged_regions("a<t>b<t>c</t>d", "<t>", "</t>") == "a"

    def test_stray_close_marker_is_kept(self) -> None:
        assert remove_tagged_regions("a</t>b", "<t>", "</t>") == "a</t>b"

    def test_no_markers_is_identity(self) -> None:
        assert remove_tagged_regions("nothing to see", "<t>", "</t>") == "nothing to see"
        assert remove_tagged_regions("", "<t>", "</t>") == ""

    def test_multibyte_text_is_preserved(self) -> None:
        assert remove_tagged_regions("你<t>秘密</t>好🙂", "<t>", "</t>") == "你好🙂"

    def test_multibyte_markers(self) -> None:
        assert remove_tagged_regions("前【注】後", "【", "】") == "前後"

    def test_html_comments(self) -> None:
        assert remove_tagged_regions("keep<!-- drop -->this", "<!--", "-->") == "keepthis"

    def test_identical_markers_nest_and_never_close(self) -> None:
        # The open marker is tested first, so "|" always deepens the region.
        assert remove_tagged_regions("a|b|c", "|", "|") == "a"

    def test_empty_open_marker_removes_everything(self) -> None:
        assert remove_tagged_regions("anything", "", "</t>") == ""

    def test_empty_close_marker_removes_only_open_markers(self) -> None:
        assert remove_tagged_regions("a<t>b<t>c", "<t>", "") == "abc"

    @pytest.mark.parametrize("text", [
        "Hello <t>secret</t> world",
        "a<t>b<t>c</t>d</t>e",
        "before <t>unfinished",
    ])
    def test_idempotent(self, text: str) -> None:
        once = remove_tagged_regions(text, "<t>", "</t>")
        assert remove_tagged_regions(once, "<t>", "</t>") == once


def test_deep_nesting_runs_in_linear_time() -> None:
    k = 40_000
    text = "<t>" * k + "</t>" * k + "tail"

    started = time.perf_counter()
    assert remove_tagged_regions(text, "<t>", "</t>") == "tail"
    assert time.perf_counter() - started < 2.0


def test_many_sibling_regions() -> None:
    text = "x<t>y</t>" * 20_000 + "end"
    assert remove_tagged_regions(text, "<t>", "</t>") == "x" * 20_000 + "end"
