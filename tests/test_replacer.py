from i18nsmith.core.extractor import StringExtractor
from i18nsmith.core.models import QuoteType, TranslationKeyWithPosition
from i18nsmith.core.replacer import CodeReplacer, detect_jsx_context
from i18nsmith.core.strategies import ReplacementStrategy


def _record(key, start, end, quote_type=QuoteType.DOUBLE):
    return TranslationKeyWithPosition(key, key, "test.js", 1, start, end, quote_type)


def test_rewrite_round_trip():
    content = 'const msg = "Hello World";'
    start = content.index('"')
    record = _record("hello_world", start, start + len('"Hello World"'))
    result = CodeReplacer().replace(content, [record], ReplacementStrategy.GENERIC)
    assert result == 'const msg = t("hello_world");'


def test_back_to_front_keeps_surroundings():
    content = 'a("First thing") + b("Second thing") + c("Third thing")'
    records = StringExtractor().extract_with_positions(content)
    assert len(records) == 3

    result = CodeReplacer().replace(content, records, ReplacementStrategy.GENERIC)
    assert result == 'a(t("first_thing")) + b(t("second_thing")) + c(t("third_thing"))'

    expected_length = len(content) + sum(
        len(ReplacementStrategy.GENERIC.translate_call(r.id)) - (r.end_byte - r.start_byte) for r in records
    )
    assert len(result) == expected_length


def test_record_order_does_not_matter():
    content = 'x = "One message"; y = "Two message";'
    records = StringExtractor().extract_with_positions(content)
    forward = CodeReplacer().replace(content, records, ReplacementStrategy.GENERIC)
    backward = CodeReplacer().replace(content, list(reversed(records)), ReplacementStrategy.GENERIC)
    assert forward == backward == 'x = t("one_message"); y = t("two_message");'


def test_detect_jsx_context():
    jsx = '<div>"Save Changes"</div>'
    # Inside the opening tag
    assert detect_jsx_context(jsx, 4) is True
    assert detect_jsx_context(jsx, jsx.index('"')) is False
    code = 'const x = "Save Changes";'
    assert detect_jsx_context(code, code.index('"')) is False
    assert detect_jsx_context(code, 10_000) is False
    assert detect_jsx_context("", 0) is False


def test_react_jsx_context_uses_original_buffer():
    content = '<Trans label="Save Changes" />'
    records = StringExtractor().extract_with_positions(content)
    assert len(records) == 1
    result = CodeReplacer().replace(content, records, ReplacementStrategy.REACT_I18N)
    assert result == '<Trans label={t("save_changes")} />'


def test_vue_call():
    content = "<template><p>Welcome home</p></template>"
    records = StringExtractor().extract_with_positions(content)
    result = CodeReplacer().replace(content, records, ReplacementStrategy.VUE_I18N)
    assert result == "<template><p>{{ $t('welcome_home') }}</p></template>"


def test_out_of_range_span_is_skipped():
    content = 'x = "Hello World";'
    bad = _record("oops", 5, len(content) + 10)
    inverted = _record("oops", 8, 4)
    assert CodeReplacer().replace(content, [bad, inverted], ReplacementStrategy.GENERIC) == content


def test_no_records_returns_content_unchanged():
    content = "const a = 1;"
    assert CodeReplacer().replace(content, [], ReplacementStrategy.REACT_I18N) == content


def test_offsets_are_code_points_after_non_ascii_text():
    content = 'const é = "Café crème"; const msg = "Hello World";'
    records = StringExtractor().extract_with_positions(content)
    last = records[-1]
    assert last.start_byte == content.index('"Hello World"')
    result = CodeReplacer().replace(content, records, ReplacementStrategy.GENERIC)
    assert result == 'const é = t("café_crème"); const msg = t("hello_world");'
