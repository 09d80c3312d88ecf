"""
Heuristic classifier deciding whether a string literal is human-facing text.

A literal is rejected as soon as it looks like a URL, an e-mail
address, a path, a package name or a component name.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Optional

# Framework / package words that show up as literals in build configs and imports
DEFAULT_EXCLUDED_STRINGS: FrozenSet[str] = frozenset({
    'react', 'tsx', 'jsx', 'javascript', 'typescript', 'vue', 'angular',
    'svelte', 'next', 'remix', 'gatsby', 'node_modules', 'dist', 'build',
})

URL_PREFIXES = ('http://', 'https://', 'ftp://', 'data:', 'file://')

MIN_TEXT_LENGTH = 3
MAX_PACKAGE_NAME_LENGTH = 20
MAX_SLASHES = 2


def _byte_length(text: str) -> int:
    return len(text.encode('utf-8'))


def is_pascal_case(text: str) -> bool:
    """Starts uppercase, no spaces/hyphens, at least one lowercase letter."""
    if not text or not text[0].isupper():
        return False
    if ' ' in text or '-' in text:
        return False
    return any(c.islower() for c in text)


def is_email_like(text: str) -> bool:
    if '@' not in text or '.' not in text or _byte_length(text) <= 5:
        return False
    _, domain = text.split('@', 1)
    return '.' in domain


def is_package_name(text: str) -> bool:
    return (
        all(c.islower() or c in '-_/' for c in text)
        and _byte_length(text) < MAX_PACKAGE_NAME_LENGTH
    )


class CandidateFilter:
    """Accept/reject classifier for raw literal text."""

    def __init__(self, excluded: Optional[Iterable[str]] = None):
        self.excluded = set(DEFAULT_EXCLUDED_STRINGS)
        if excluded:
            self.excluded.update(excluded)

    def should_extract(self, text: str) -> bool:
        if _byte_length(text) < MIN_TEXT_LENGTH:
            return False

        if text in self.excluded:
            return False

        # Component / class names (Button, MyComponent)
        if is_pascal_case(text):
            return False

        if text.startswith(URL_PREFIXES):
            return False

        if is_email_like(text):
            return False

        # "/path/to/file"
        if text.count('/') > MAX_SLASHES:
            return False

        # "lodash", "date-fns", "my_module/sub"
        if is_package_name(text):
            return False

        # Scoped packages (@org/pkg)
        if text.startswith('@'):
            return False

        if './' in text or '../' in text:
            return False

        return True
