"""
Value types shared by the scanner, extractor and rewriter.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class QuoteType(Enum):
    """Lexical origin of a literal. HTML attribute values are DOUBLE."""
    DOUBLE = "double"      # "text"
    SINGLE = "single"      # 'text'
    TEMPLATE = "template"  # `text`
    JSX_TEXT = "jsx_text"  # <div>text</div>


class FileType(Enum):
    JAVASCRIPT = "js"
    TYPESCRIPT = "ts"
    JSX = "jsx"
    TSX = "tsx"
    VUE = "vue"
    HTML = "html"
    OTHER = "other"

    @classmethod
    def from_extension(cls, ext: str) -> "FileType":
        ext = (ext or "").lower().lstrip(".")
        if ext == "htm":
            return cls.HTML
        for member in cls:
            if member is not cls.OTHER and member.value == ext:
                return member
        return cls.OTHER

    @property
    def is_supported(self) -> bool:
        return self is not FileType.OTHER


@dataclass(frozen=True)
class TranslationKey:
    id: str          # e.g. "button_login"
    source: str      # original text: "Login"
    file_path: str
    line: int


@dataclass(frozen=True)
class TranslationKeyWithPosition:
    """TranslationKey plus the span it was found at.

    ``start_byte``/``end_byte`` are offsets into the decoded str that was
    scanned (code points, not UTF-8 byte offsets); slice the same str with them.
    The span covers the whole literal including its quotes, except for JSX
    text (the trimmed text) and HTML attributes (the value only).
    """
    id: str
    source: str
    file_path: str
    line: int
    start_byte: int
    end_byte: int
    quote_type: QuoteType

    def to_key(self) -> TranslationKey:
        return TranslationKey(
            id=self.id,
            source=self.source,
            file_path=self.file_path,
            line=self.line,
        )
