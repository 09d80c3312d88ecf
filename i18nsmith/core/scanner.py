"""
Regex-based lexical scanner for JS/TS/JSX/Vue/HTML sources.

The scanner is not a parser. It runs five independent passes over the whole
buffer and reports every literal-looking span it finds, in pass order and
left to right inside each pass:

1. double-quoted strings        "text"
2. single-quoted strings        'text'
3. template literals            `text`   (skipped when they contain ${...})
4. markup text nodes            >text</  (span is the trimmed text)
5. accessibility attributes     placeholder="text" alt= title= aria-label=
                                (span is the attribute value)

Known blind spots: a string may be reported by more than one pass (an
attribute value is also a double-quoted string), quotes inside comments and
regex literals are matched like any other quote, and template literals with
nested backticks are cut at the first inner backtick.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Iterator, List, Tuple

from .models import QuoteType

DOUBLE_QUOTED_RE = re.compile(r'"(?:[^"\\]|\\.)*"')
SINGLE_QUOTED_RE = re.compile(r"'(?:[^'\\]|\\.)*'")
TEMPLATE_LITERAL_RE = re.compile(r'`(?:[^`\\]|\\.)*`')
JSX_TEXT_RE = re.compile(r'>(?P<body>[^<]*)</')
HTML_ATTRIBUTE_RE = re.compile(r'(?P<attr>placeholder|alt|title|aria-label)="(?P<value>[^"]*)"')

EXPRESSION_MARKERS = ('${', '{')


@dataclass(frozen=True)
class Candidate:
    text: str        # literal content without delimiters
    start: int       # span start (inclusive)
    end: int         # span end (exclusive)
    quote_type: QuoteType


def _has_expression(text: str) -> bool:
    return any(marker in text for marker in EXPRESSION_MARKERS)


class LexicalScanner:
    """Runs the five literal passes over a text buffer."""

    def __init__(self):
        self.passes: List[Tuple[str, Callable[[str], Iterator[Candidate]]]] = [
            ('double', self.scan_double_quoted),
            ('single', self.scan_single_quoted),
            ('template', self.scan_template_literals),
            ('jsx_text', self.scan_jsx_text),
            ('attribute', self.scan_html_attributes),
        ]

    def scan(self, content: str) -> List[Candidate]:
        candidates: List[Candidate] = []
        for _name, scan_pass in self.passes:
            candidates.extend(scan_pass(content))
        return candidates

    def scan_double_quoted(self, content: str) -> Iterator[Candidate]:
        yield from self._scan_quoted(content, DOUBLE_QUOTED_RE, QuoteType.DOUBLE)

    def scan_single_quoted(self, content: str) -> Iterator[Candidate]:
        yield from self._scan_quoted(content, SINGLE_QUOTED_RE, QuoteType.SINGLE)

    def scan_template_literals(self, content: str) -> Iterator[Candidate]:
        for candidate in self._scan_quoted(content, TEMPLATE_LITERAL_RE, QuoteType.TEMPLATE):
            # `Hello ${name}` is an expression, not a literal
            if '${' in candidate.text:
                continue
            yield candidate

    def scan_jsx_text(self, content: str) -> Iterator[Candidate]:
        for match in JSX_TEXT_RE.finditer(content):
            body = match.group('body')
            text = body.strip()
            if not text or _has_expression(text):
                continue
            start = match.start('body') + (len(body) - len(body.lstrip()))
            yield Candidate(text, start, start + len(text), QuoteType.JSX_TEXT)

    def scan_html_attributes(self, content: str) -> Iterator[Candidate]:
        for match in HTML_ATTRIBUTE_RE.finditer(content):
            text = match.group('value')
            if not text or _has_expression(text):
                continue
            yield Candidate(text, match.start('value'), match.end('value'), QuoteType.DOUBLE)

    def _scan_quoted(self, content: str, pattern: re.Pattern, quote_type: QuoteType) -> Iterator[Candidate]:
        for match in pattern.finditer(content):
            literal = match.group(0)
            yield Candidate(literal[1:-1], match.start(), match.end(), quote_type)
