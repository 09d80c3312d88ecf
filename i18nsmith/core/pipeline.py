"""
Use cases driving the engine over a source tree: extract, translate,
replace and merge.

File I/O failures are per file: they are logged with the offending path,
recorded in the summary and the run continues with the next file.
"""

from __future__ import annotations

import asyncio
import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .exceptions import ExtractionError, FileProcessingError, ReplacementError
from .extractor import StringExtractor
from .filters import CandidateFilter
from .imports import ImportInjector
from .models import TranslationKeyWithPosition
from .replacer import CodeReplacer
from .scanner import LexicalScanner
from .strategies import ReplacementStrategy
from .translator import BaseTranslator, TranslationManager, TranslationRequest
from ..utils.encoding import read_source_file, write_text
from ..utils.file_system import (
    FileSystemScanner,
    create_i18n_filename,
    get_original_path,
    is_i18n_output,
    read_language_file,
    write_language_file,
)


@dataclass
class EngineComponents:
    """The capability set a use case works with. Swap any member to change behaviour."""
    scanner: LexicalScanner = field(default_factory=LexicalScanner)
    extractor: Optional[StringExtractor] = None
    replacer: CodeReplacer = field(default_factory=CodeReplacer)
    import_injector: ImportInjector = field(default_factory=ImportInjector)
    file_scanner: FileSystemScanner = field(default_factory=FileSystemScanner)
    translator: Optional[BaseTranslator] = None

    def __post_init__(self):
        if self.extractor is None:
            self.extractor = StringExtractor(scanner=self.scanner)

    @classmethod
    def from_config(cls, config_manager, translator: Optional[BaseTranslator] = None) -> "EngineComponents":
        settings = config_manager.extraction_settings
        scanner = LexicalScanner()
        return cls(
            scanner=scanner,
            extractor=StringExtractor(scanner, CandidateFilter(settings.excluded_strings)),
            file_scanner=FileSystemScanner(settings.skip_dirs),
            translator=translator,
        )


@dataclass
class ExtractSummary:
    output_file: Optional[Path] = None
    files_scanned: int = 0
    translations: Dict[str, str] = field(default_factory=dict)
    failed: List[Tuple[Path, str]] = field(default_factory=list)


class ExtractStringsUseCase:
    """Collects {key: text} across a source tree into one language file."""

    def __init__(self, components: Optional[EngineComponents] = None):
        self.logger = logging.getLogger(__name__)
        self.components = components or EngineComponents()

    def collect(self, source_path: Union[str, Path]) -> ExtractSummary:
        if not Path(source_path).exists():
            raise ExtractionError(f"Path not found: {source_path}")

        summary = ExtractSummary()
        files = self.components.file_scanner.scan(source_path)
        self.logger.info("Scanned %s files", len(files))

        for file_path, _file_type in files:
            try:
                content = read_source_file(file_path)
            except FileProcessingError as e:
                self.logger.error("Error reading %s: %s", file_path, e.cause)
                summary.failed.append((file_path, str(e.cause)))
                continue
            summary.files_scanned += 1
            for key in self.components.extractor.extract(content, str(file_path)):
                summary.translations.setdefault(key.id, key.source)

        self.logger.info("Found %s unique keys", len(summary.translations))
        return summary

    def execute(
        self,
        source_path: Union[str, Path],
        output_path: Union[str, Path],
        base_language: str,
    ) -> ExtractSummary:
        summary = self.collect(source_path)
        summary.output_file = Path(output_path) / f"{base_language}.json"
        write_language_file(summary.output_file, summary.translations)
        return summary


@dataclass
class TranslateSummary:
    written: Dict[str, Path] = field(default_factory=dict)
    translated: int = 0
    failed: int = 0


class TranslateKeysUseCase:
    """Translates a source language file into one file per target language."""

    def __init__(
        self,
        translator: BaseTranslator,
        request_delay: float = 0.1,
        min_text_length: int = 2,
        source_lang: str = "auto",
        max_retries: int = 1,
    ):
        self.logger = logging.getLogger(__name__)
        self.translator = translator
        self.request_delay = request_delay
        self.min_text_length = min_text_length
        self.source_lang = source_lang
        self.manager = TranslationManager(max_retries=max_retries)
        self.manager.add_translator(translator)

    async def execute(self, source_file: Union[str, Path], target_langs: Sequence[str]) -> TranslateSummary:
        source_file = Path(source_file)
        source = read_language_file(source_file)
        self.logger.info("Loaded %s strings from source", len(source))

        summary = TranslateSummary()
        try:
            for target_lang in target_langs:
                self.logger.info("Translating to %s", target_lang)
                translated = await self.translate_dictionary(source, target_lang, summary)
                output_file = source_file.parent / f"{target_lang}.json"
                write_language_file(output_file, translated)
                summary.written[target_lang] = output_file
        finally:
            await self.manager.close_all()
        return summary

    async def translate_dictionary(
        self,
        source: Dict[str, str],
        target_lang: str,
        summary: Optional[TranslateSummary] = None,
    ) -> Dict[str, str]:
        summary = summary or TranslateSummary()
        translated: Dict[str, str] = {}
        for index, (key, value) in enumerate(source.items()):
            if len(value) < self.min_text_length:
                translated[key] = value
                continue

            request = TranslationRequest(value, self.source_lang, target_lang, self.translator.engine,
                                         metadata={'key': key})
            result = await self.manager.translate_with_retry(request)
            if result.success:
                translated[key] = result.translated_text
                summary.translated += 1
                self.logger.debug("Translated %s: %s", key, value)
            else:
                self.logger.warning("Failed to translate %s: %s", key, result.error)
                translated[key] = value
                summary.failed += 1

            # Rate limiting between provider calls
            if self.request_delay and index < len(source) - 1:
                await asyncio.sleep(self.request_delay)
        return translated


@dataclass
class FileReplacement:
    file_path: Path
    records: List[TranslationKeyWithPosition] = field(default_factory=list)
    output_path: Optional[Path] = None
    content: str = ""


@dataclass
class ReplaceSummary:
    files: List[FileReplacement] = field(default_factory=list)
    failed: List[Tuple[Path, str]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def total_replaced(self) -> int:
        return sum(len(f.records) for f in self.files)


class ReplaceStringsUseCase:
    """Rewrites literals whose key exists in a translation file into t() calls."""

    def __init__(self, components: Optional[EngineComponents] = None):
        self.logger = logging.getLogger(__name__)
        self.components = components or EngineComponents()

    def rewrite(
        self,
        content: str,
        translations: Dict[str, str],
        strategy: ReplacementStrategy,
        file_path: str = "",
    ) -> Tuple[str, List[TranslationKeyWithPosition]]:
        """Pure rewrite of one buffer. Returns (new_content, applied_records)."""
        records = [
            record
            for record in self.components.extractor.extract_with_positions(content, file_path)
            if record.id in translations
        ]
        if not records:
            return content, []
        new_content = self.components.replacer.replace(content, records, strategy)
        new_content = self.components.import_injector.ensure_import(new_content, strategy)
        return new_content, records

    def execute(
        self,
        source_path: Union[str, Path],
        translation_file: Union[str, Path],
        strategy: ReplacementStrategy,
        dry_run: bool = False,
        in_place: bool = False,
    ) -> ReplaceSummary:
        if not Path(source_path).exists():
            raise ReplacementError(f"Path not found: {source_path}")
        try:
            translations = read_language_file(translation_file)
        except FileProcessingError as e:
            raise ReplacementError(f"Cannot load translations from {translation_file}: {e.cause}") from e
        summary = ReplaceSummary(dry_run=dry_run)

        for file_path, _file_type in self.components.file_scanner.scan(source_path):
            try:
                content = read_source_file(file_path)
            except FileProcessingError as e:
                self.logger.error("Error reading %s: %s", file_path, e.cause)
                summary.failed.append((file_path, str(e.cause)))
                continue

            new_content, records = self.rewrite(content, translations, strategy, str(file_path))
            if not records:
                continue

            output_path = file_path if in_place else create_i18n_filename(file_path)
            replacement = FileReplacement(file_path, records, output_path, new_content)

            if dry_run:
                self.logger.info("Would replace %s strings in %s", len(records), file_path)
                summary.files.append(replacement)
                continue

            try:
                write_text(output_path, new_content)
            except FileProcessingError as e:
                self.logger.error("Error writing %s: %s", output_path, e.cause)
                summary.failed.append((output_path, str(e.cause)))
                continue

            self.logger.info("Replaced %s strings in %s", len(records), output_path)
            summary.files.append(replacement)

        return summary


@dataclass
class MergeFile:
    i18n_file: Path
    original_file: Path
    file_size: int


@dataclass
class MergeSummary:
    files_to_merge: List[MergeFile] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files_to_merge)


@dataclass
class MergeResult:
    successful: int = 0
    failed: int = 0
    errors: List[Tuple[Path, str]] = field(default_factory=list)


class MergeI18nUseCase:
    """Moves generated ``name.i18n.ext`` files over their originals."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def scan(self, directory: Union[str, Path]) -> MergeSummary:
        summary = MergeSummary()
        for i18n_path in sorted(Path(directory).rglob("*")):
            if not i18n_path.is_file() or not is_i18n_output(i18n_path):
                continue
            original_path = get_original_path(i18n_path)
            if original_path.exists():
                summary.files_to_merge.append(
                    MergeFile(i18n_path, original_path, i18n_path.stat().st_size)
                )
        return summary

    def execute_merge(self, summary: MergeSummary) -> MergeResult:
        result = MergeResult()
        for merge_file in summary.files_to_merge:
            try:
                shutil.copyfile(merge_file.i18n_file, merge_file.original_file)
                merge_file.i18n_file.unlink()
            except OSError as e:
                self.logger.error("Error merging %s: %s", merge_file.i18n_file, e)
                result.failed += 1
                result.errors.append((merge_file.i18n_file, str(e)))
                continue
            result.successful += 1
            self.logger.info("Merged %s -> %s", merge_file.i18n_file, merge_file.original_file)
        return result
