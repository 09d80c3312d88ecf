# -*- coding: utf-8 -*-
"""
i18nsmith CLI Main Module
"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

from i18nsmith import __version__
from i18nsmith.core.exceptions import I18nSmithError
from i18nsmith.core.pipeline import (
    EngineComponents,
    ExtractStringsUseCase,
    MergeI18nUseCase,
    ReplaceStringsUseCase,
    TranslateKeysUseCase,
)
from i18nsmith.core.strategies import ReplacementStrategy
from i18nsmith.core.translator import TranslationEngine, create_translator
from i18nsmith.utils.config import DEFAULT_CONFIG_FILE, ApiProvider, ConfigManager


def setup_logging(verbose: bool):
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def print_header(title: str):
    """Print the CLI header."""
    print("\n" + "="*60)
    print(f"       i18nsmith v{__version__} - {title}")
    print("="*60)


def parse_languages(value: str) -> List[str]:
    return [lang.strip() for lang in value.split(',') if lang.strip()]


def run_extract_command(args, config_manager: ConfigManager) -> int:
    """Extract translatable strings into <output>/<lang>.json."""
    print_header("Extract")
    settings = config_manager.extraction_settings
    source = os.path.abspath(args.source)
    if not os.path.exists(source):
        print(f"  Error: Path not found: {source}")
        return 1

    output = args.output or settings.output_dir
    lang = args.lang or settings.base_language
    print(f"  Source: {source}")
    print(f"  Output: {output}")

    components = EngineComponents.from_config(config_manager)
    summary = ExtractStringsUseCase(components).execute(source, output, lang)

    print(f"\n  Files scanned: {summary.files_scanned}")
    print(f"  Unique keys:   {len(summary.translations)}")
    print(f"  Written:       {summary.output_file}")
    for path, error in summary.failed:
        print(f"  ✗ {path}: {error}")
    return 0 if not summary.failed else 1


def run_translate_command(args, config_manager: ConfigManager) -> int:
    """Translate a language file into one or more target languages."""
    print_header("Translate")
    settings = config_manager.translation_settings

    if not os.path.isfile(args.source):
        print(f"  Error: Source file not found: {args.source}")
        return 1

    target_langs = parse_languages(args.to)
    if not target_langs:
        print("  Error: No target languages specified")
        return 1

    provider = ApiProvider.from_string(args.api or settings.provider)
    api_key = config_manager.resolve_api_key(provider, args.api_key)

    print(f"  Source: {args.source}")
    print(f"  Target languages: {', '.join(target_langs)}")
    print(f"  API: {provider.value}")

    engine = TranslationEngine(provider.value)
    if engine is TranslationEngine.PSEUDO:
        translator = create_translator(engine, mode=settings.pseudo_mode)
    else:
        translator = create_translator(engine, api_key=api_key, timeout=settings.timeout)
    components = EngineComponents.from_config(config_manager, translator=translator)

    use_case = TranslateKeysUseCase(
        components.translator,
        request_delay=settings.request_delay,
        min_text_length=settings.min_text_length,
        source_lang=settings.source_language,
        max_retries=settings.max_retries,
    )
    summary = asyncio.run(use_case.execute(args.source, target_langs))

    print(f"\n  Translated: {summary.translated}")
    print(f"  Failed:     {summary.failed} (kept source text)")
    for lang, path in summary.written.items():
        print(f"  {lang}: {path}")
    return 0


def run_replace_command(args, config_manager: ConfigManager) -> int:
    """Replace literals with translation calls."""
    print_header("Replace")
    settings = config_manager.replace_settings
    strategy = ReplacementStrategy.from_string(args.strategy or settings.strategy)
    in_place = args.in_place or settings.in_place

    print(f"  Source: {args.source}")
    print(f"  Translations: {args.translations}")
    print(f"  Strategy: {strategy.value}")
    if args.dry_run:
        print("  DRY RUN MODE - No files will be modified")
    if in_place:
        print("  IN-PLACE MODE - Original files will be modified")

    components = EngineComponents.from_config(config_manager)
    summary = ReplaceStringsUseCase(components).execute(
        args.source, args.translations, strategy, dry_run=args.dry_run, in_place=in_place
    )

    for replacement in summary.files:
        verb = "Would replace" if summary.dry_run else "Replaced"
        print(f"\n  {verb} {len(replacement.records)} strings in {replacement.file_path}")
        if summary.dry_run:
            for record in replacement.records:
                print(f"    - Line {record.line}: \"{record.source}\" -> t(\"{record.id}\")")
    for path, error in summary.failed:
        print(f"  ✗ {path}: {error}")

    print(f"\n  Total: {summary.total_replaced} strings in {len(summary.files)} files")
    return 0 if not summary.failed else 1


def run_merge_command(args, config_manager: ConfigManager) -> int:
    """Merge generated .i18n.* files back into the originals."""
    print_header("Merge")
    directory = os.path.abspath(args.directory)
    if not os.path.isdir(directory):
        print(f"  Error: Directory not found: {directory}")
        return 1

    use_case = MergeI18nUseCase()
    summary = use_case.scan(directory)
    if not summary.files_to_merge:
        print("\n  No .i18n.* files found to merge.")
        return 0

    if not args.confirm:
        print(f"\n  Preview Mode - {summary.total_files} files ready to merge\n")
        for idx, merge_file in enumerate(summary.files_to_merge, 1):
            size_kb = merge_file.file_size / 1024.0
            print(f"  {idx}. {merge_file.i18n_file.name} ({size_kb:.1f} KB)")
            print(f"     -> {merge_file.original_file.name}")
        print("\n  Run with --confirm to merge these files.")
        return 0

    result = use_case.execute_merge(summary)
    print(f"\n  {result.successful} files merged successfully")
    if result.failed:
        print(f"  {result.failed} files failed")
        for path, error in result.errors:
            print(f"  ✗ {path}: {error}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Path to JSON configuration file")
    common.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    parser = argparse.ArgumentParser(
        prog="i18nsmith",
        description="Automatically extract and manage translations in your codebase",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    extract_parser = subparsers.add_parser('extract', parents=[common], help='Extract translatable strings')
    extract_parser.add_argument("source", help="Source directory to scan for translatable strings")
    extract_parser.add_argument("--output", "-o", help="Output directory for translation files (default: ./i18n)")
    extract_parser.add_argument("--lang", "-l", help="Base language code (default: fr)")

    translate_parser = subparsers.add_parser('translate', parents=[common], help='Translate a language file')
    translate_parser.add_argument("source", help="Path to source translation file (e.g., i18n/fr.json)")
    translate_parser.add_argument("--to", required=True, help="Target languages (comma-separated, e.g., en,es,de)")
    translate_parser.add_argument("--api", "-a", choices=["deepl", "openai", "pseudo"],
                                  help="Translation API provider (default: deepl)")
    translate_parser.add_argument("--api-key", help="API key (overrides environment variable)")

    replace_parser = subparsers.add_parser('replace', parents=[common], help='Replace strings with t() calls')
    replace_parser.add_argument("source", help="Source directory to scan for strings to replace")
    replace_parser.add_argument("--translations", "-t", required=True, help="Translation file (e.g., i18n/fr.json)")
    replace_parser.add_argument("--strategy", "-s", choices=[s.value for s in ReplacementStrategy],
                                help="Replacement strategy (default: react-i18n)")
    replace_parser.add_argument("--dry-run", action="store_true", help="Preview changes without writing files")
    replace_parser.add_argument("--in-place", action="store_true",
                                help="Replace in original files instead of creating .i18n.* files")

    merge_parser = subparsers.add_parser('merge', parents=[common], help='Merge .i18n.* files into originals')
    merge_parser.add_argument("directory", help="Directory to scan for .i18n.* files")
    merge_parser.add_argument("--confirm", action="store_true", help="Actually perform the merge")

    return parser


COMMANDS = {
    'extract': run_extract_command,
    'translate': run_translate_command,
    'replace': run_replace_command,
    'merge': run_merge_command,
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        return 1

    setup_logging(args.verbose)
    try:
        config_manager = ConfigManager(args.config)
        return COMMANDS[args.command](args, config_manager)
    except I18nSmithError as e:
        logging.getLogger(__name__).error("%s", e)
        print(f"\n  Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
