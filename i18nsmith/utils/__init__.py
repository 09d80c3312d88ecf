"""
Utils module for i18nsmith
==========================
"""

from .config import ConfigManager, ExtractionSettings, ReplaceSettings, TranslationSettings, ApiKeys, ApiProvider
from .encoding import read_text_safely, read_source_file, write_text
from .file_system import (
    FileSystemScanner, read_language_file, write_language_file, create_i18n_filename, get_original_path
)

__all__ = [
    'ConfigManager', 'ExtractionSettings', 'ReplaceSettings', 'TranslationSettings', 'ApiKeys', 'ApiProvider',
    'read_text_safely', 'read_source_file', 'write_text',
    'FileSystemScanner', 'read_language_file', 'write_language_file', 'create_i18n_filename', 'get_original_path',
]
