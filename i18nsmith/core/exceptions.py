"""
Custom exceptions for i18nsmith.
"""

from pathlib import Path
from typing import Optional, Union


class I18nSmithError(Exception):
    """Base exception for i18nsmith."""
    pass

class ExtractionError(I18nSmithError):
    """Raised when string extraction fails."""
    pass

class ReplacementError(I18nSmithError):
    """Raised when rewriting a source file fails."""
    pass

class TranslationError(I18nSmithError):
    """Raised when translation-related errors occur."""
    pass

class ConfigError(I18nSmithError):
    """Raised when configuration-related errors occur."""
    pass

class FileProcessingError(I18nSmithError):
    """Raised when a source or language file cannot be read or written."""

    def __init__(self, path: Union[str, Path], cause: Optional[BaseException] = None):
        self.path = Path(path)
        self.cause = cause
        message = f"{self.path}: {cause}" if cause else str(self.path)
        super().__init__(message)
