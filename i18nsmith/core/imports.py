"""Makes sure the translation import of a strategy is present in a file."""

from __future__ import annotations

import re
from typing import Optional

from .strategies import ReplacementStrategy

IMPORT_SOURCE_RE = re.compile(r'''from\s+['"]([^'"]+)['"]''')
IMPORT_LINE_RE = re.compile(r'''^import\s+.*from\s+['"][^'"]+['"];?[ \t]*$''', re.MULTILINE)


def import_package(import_statement: str) -> Optional[str]:
    """ "import { t } from './i18n';" -> "./i18n" """
    match = IMPORT_SOURCE_RE.search(import_statement)
    return match.group(1) if match else None


def has_import(content: str, import_statement: str) -> bool:
    # Substring test: any mention of the package counts as imported
    package = import_package(import_statement)
    return bool(package) and package in content


def find_import_insertion_point(content: str) -> int:
    """Offset just after the last top-level import line, or 0."""
    last = None
    for last in IMPORT_LINE_RE.finditer(content):
        pass
    return last.end() if last else 0


class ImportInjector:
    def ensure_import(self, content: str, strategy: ReplacementStrategy) -> str:
        statement = strategy.import_statement()
        if has_import(content, statement):
            return content

        point = find_import_insertion_point(content)
        return f"{content[:point]}\n{statement}\n{content[point:]}"
