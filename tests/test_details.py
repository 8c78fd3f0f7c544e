"""Best-effort tag/params/size extraction from model detail pages."""

from __future__ import annotations

from adapters.library import RegexDetailExtractor, extract_tags
from adapters.library.details import context_block, split_into_lines
from conftest import LLAMA2_HTML, LLAMA3_HTML, LLAMA31_HTML, TINYDOLPHIN_HTML, TINYLLAMA_HTML
from core.domain.models import TagRecord


def test_extract_tags_deduplicates_and_sorts():
    assert extract_tags("llama3", LLAMA3_HTML) == ["instruct", "latest"]


def test_extract_tags_escapes_model_name():
    # "." must not act as a regex wildcard.
    assert extract_tags("llama3.1", "llama3x1:8b llama3.1:70b") == ["70b"]


def test_split_into_lines_breaks_after_closing_markers():
    lines = split_into_lines("<div><a>x</a><span>y</span></div>z")
    assert lines == ["<div><a>x</a>", "<span>y</span>", "</div>", "z"]


def test_context_block_takes_anchor_line_and_following_lines():
    lines = [f"line {i}" for i in range(30)]
    lines[3] = 'href="/library/m:t"'
    block = context_block(lines, 'href="/library/m:t"', context_lines=20)
    assert block[0] == 'href="/library/m:t"'
    assert len(block) == 21


def test_context_block_missing_anchor():
    assert context_block(["a", "b"], "zzz", context_lines=20) == []


def test_params_and_size_found_near_anchor():
    records = RegexDetailExtractor().extract_details("llama2", LLAMA2_HTML)
    assert records == [TagRecord(model="llama2", tag="latest", params="7B", size="3.8GB")]


def test_size_with_space_and_per_tag_blocks():
    records = RegexDetailExtractor().extract_details("llama3", LLAMA3_HTML)
    assert records == [
        TagRecord(model="llama3", tag="instruct", params="8.0B", size="4.7 GB"),
        TagRecord(model="llama3", tag="latest", params="8.0B", size="4.7GB"),
    ]


def test_size_unit_is_case_insensitive():
    html = '<a href="/library/m:q4">m:q4</a><span>512mb</span>'
    (record,) = RegexDetailExtractor().extract_details("m", html)
    assert record.size == "512mb"


def test_tag_name_carrying_param_count_is_picked_up():
    records = RegexDetailExtractor().extract_details("llama3.1", LLAMA31_HTML)
    assert [(r.tag, r.params, r.size) for r in records] == [
        ("70b", "70b", "43GB"),
        ("8b", "8b", "4.9GB"),
    ]


def test_no_tags_yields_single_synthetic_latest():
    records = RegexDetailExtractor().extract_details("tinyllama", TINYLLAMA_HTML)
    assert records == [TagRecord(model="tinyllama", tag="latest", params="N/A", size="N/A")]


def test_tags_without_metadata_are_not_available():
    records = RegexDetailExtractor().extract_details("tinydolphin", TINYDOLPHIN_HTML)
    assert records == [TagRecord(model="tinydolphin", tag="v2.8", params="N/A", size="N/A")]


def test_tag_without_anchor_gets_not_available():
    html = "<pre>ollama run m:q4</pre><span>7B</span><span>4GB</span>"
    (record,) = RegexDetailExtractor().extract_details("m", html)
    assert (record.tag, record.params, record.size) == ("q4", "N/A", "N/A")


def test_metadata_beyond_window_is_ignored():
    filler = "<div>-</div>" * 5
    html = f'<a href="/library/m:q4">m:q4</a>{filler}<span>7B</span>'
    narrow = RegexDetailExtractor(context_lines=3).extract_details("m", html)
    wide = RegexDetailExtractor(context_lines=20).extract_details("m", html)
    assert narrow[0].params == "N/A"
    assert wide[0].params == "7B"


def test_custom_library_path_anchor():
    html = '<a href="/models/m:q4">m:q4</a><span>3B</span>'
    default = RegexDetailExtractor().extract_details("m", html)
    custom = RegexDetailExtractor(library_path="models").extract_details("m", html)
    assert default[0].params == "N/A"
    assert custom[0].params == "3B"
