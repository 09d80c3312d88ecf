"""
Core module for i18nsmith
=========================
"""

from typing import Iterable, List

from .exceptions import (
    I18nSmithError, ExtractionError, ReplacementError, TranslationError, ConfigError, FileProcessingError
)
from .models import QuoteType, FileType, TranslationKey, TranslationKeyWithPosition
from .strategies import ReplacementStrategy
from .scanner import Candidate, LexicalScanner
from .filters import CandidateFilter, is_pascal_case
from .keys import derive_key
from .extractor import StringExtractor
from .replacer import CodeReplacer, detect_jsx_context
from .imports import ImportInjector
from .translator import (
    TranslationEngine, TranslationRequest, TranslationResult,
    BaseTranslator, DeepLTranslator, OpenAITranslator, PseudoTranslator, TranslationManager
)
from .pipeline import (
    EngineComponents, ExtractStringsUseCase, TranslateKeysUseCase, ReplaceStringsUseCase, MergeI18nUseCase
)

_default_filter = CandidateFilter()
_default_extractor = StringExtractor(candidate_filter=_default_filter)
_default_replacer = CodeReplacer()
_default_injector = ImportInjector()


def should_extract(text: str) -> bool:
    return _default_filter.should_extract(text)


def extract(content: str, file_path: str = "") -> List[TranslationKey]:
    return _default_extractor.extract(content, file_path)


def extract_with_positions(content: str, file_path: str = "") -> List[TranslationKeyWithPosition]:
    return _default_extractor.extract_with_positions(content, file_path)


def replace(content: str, records: Iterable[TranslationKeyWithPosition], strategy: ReplacementStrategy) -> str:
    return _default_replacer.replace(content, records, strategy)


def ensure_import(content: str, strategy: ReplacementStrategy) -> str:
    return _default_injector.ensure_import(content, strategy)


__all__ = [
    'I18nSmithError', 'ExtractionError', 'ReplacementError', 'TranslationError', 'ConfigError',
    'FileProcessingError',
    'QuoteType', 'FileType', 'TranslationKey', 'TranslationKeyWithPosition', 'ReplacementStrategy',
    'Candidate', 'LexicalScanner', 'CandidateFilter', 'is_pascal_case', 'derive_key',
    'StringExtractor', 'CodeReplacer', 'detect_jsx_context', 'ImportInjector',
    'TranslationEngine', 'TranslationRequest', 'TranslationResult',
    'BaseTranslator', 'DeepLTranslator', 'OpenAITranslator', 'PseudoTranslator', 'TranslationManager',
    'EngineComponents', 'ExtractStringsUseCase', 'TranslateKeysUseCase', 'ReplaceStringsUseCase',
    'MergeI18nUseCase',
    'should_extract', 'extract', 'extract_with_positions', 'replace', 'ensure_import',
]
