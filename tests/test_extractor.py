from i18nsmith.core.extractor import StringExtractor
from i18nsmith.core.filters import CandidateFilter
from i18nsmith.core.models import QuoteType
from i18nsmith.core.replacer import CodeReplacer
from i18nsmith.core.strategies import ReplacementStrategy


def test_extract_with_positions_basic():
    content = 'const msg = "Hello World";'
    records = StringExtractor().extract_with_positions(content, "app.js")
    assert len(records) == 1
    r = records[0]
    assert r.id == "hello_world"
    assert r.source == "Hello World"
    assert r.file_path == "app.js"
    assert r.line == 1
    assert content[r.start_byte:r.end_byte] == '"Hello World"'
    assert r.quote_type is QuoteType.DOUBLE


def test_rejected_literals_are_not_extracted():
    content = "import React from 'react';\nconst url = \"https://x.com\";\nconst C = 'MyComponent';"
    assert StringExtractor().extract_with_positions(content) == []


def test_line_numbers_are_one_based():
    content = "const a = 1;\n\nconst b = 'Second message';\n"
    records = StringExtractor().extract_with_positions(content)
    assert [r.line for r in records] == [3]


def test_extract_keeps_first_occurrence_per_key():
    content = 'a = "Save Changes";\nb = "Save Changes";\nc = "Save-Changes";'
    keys = StringExtractor().extract(content, "form.js")
    assert [(k.id, k.source, k.line) for k in keys] == [("save_changes", "Save Changes", 1)]


def test_extract_with_positions_keeps_every_occurrence():
    content = 'a = "Save Changes";\nb = "Save Changes";'
    records = StringExtractor().extract_with_positions(content)
    assert [r.line for r in records] == [1, 2]
    assert {r.id for r in records} == {"save_changes"}


def test_attribute_overlapping_double_quoted_is_dropped():
    content = '<input placeholder="Enter your name" />'
    records = StringExtractor().extract_with_positions(content)
    assert len(records) == 1
    r = records[0]
    # The double-quoted pass runs first and wins
    assert r.quote_type is QuoteType.DOUBLE
    assert content[r.start_byte:r.end_byte] == '"Enter your name"'


def test_jsx_text_record():
    content = "<div>\n  <button>Click me</button>\n</div>"
    records = StringExtractor().extract_with_positions(content)
    assert [(r.id, r.quote_type, r.line) for r in records] == [("click_me", QuoteType.JSX_TEXT, 2)]
    r = records[0]
    assert content[r.start_byte:r.end_byte] == "Click me"


def test_empty_key_candidates_are_skipped():
    content = 'x = "???";'
    assert StringExtractor().extract_with_positions(content) == []


def test_custom_filter():
    extractor = StringExtractor(candidate_filter=CandidateFilter(excluded=["Hello World"]))
    assert extractor.extract('x = "Hello World";') == []


def test_extract_file(tmp_path):
    path = tmp_path / "App.jsx"
    path.write_text('export const title = "Welcome back";\n', encoding="utf-8")
    records = StringExtractor().extract_file(path)
    assert [r.id for r in records] == ["welcome_back"]
    assert records[0].file_path == str(path)


def test_markup_text_wins_over_stray_apostrophes():
    content = "<p>Don't panic now</p>\n<p>It's all fine</p>"
    records = StringExtractor().extract_with_positions(content)
    assert [(r.id, r.quote_type) for r in records] == [
        ("dont_panic_now", QuoteType.JSX_TEXT),
        ("its_all_fine", QuoteType.JSX_TEXT),
    ]


def test_markup_with_apostrophes_rewrites_cleanly():
    content = "<p>Don't panic</p><p>It's fine</p>"
    records = StringExtractor().extract_with_positions(content)
    result = CodeReplacer().replace(content, records, ReplacementStrategy.REACT_I18N)
    assert result == '<p>t("dont_panic")</p><p>t("its_fine")</p>'
