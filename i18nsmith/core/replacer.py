"""
Positional code rewriter.

Records are applied back to front (highest start offset first) so a splice
never moves the offsets of records still waiting to be applied.
"""

from __future__ import annotations

import logging
from typing import Iterable

from .models import TranslationKeyWithPosition
from .strategies import ReplacementStrategy


def detect_jsx_context(content: str, position: int) -> bool:
    """True when more '<' than '>' appear before ``position``."""
    before = content[:max(0, min(position, len(content)))]
    return before.count('<') > before.count('>')


class CodeReplacer:
    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def replace(
        self,
        content: str,
        records: Iterable[TranslationKeyWithPosition],
        strategy: ReplacementStrategy,
    ) -> str:
        ordered = sorted(records, key=lambda r: r.start_byte, reverse=True)
        result = content

        for record in ordered:
            # Context always comes from the untouched original
            in_jsx = detect_jsx_context(content, record.start_byte)
            replacement = strategy.translate_call(record.id, in_jsx)

            if not (0 <= record.start_byte <= record.end_byte <= len(result)):
                self.logger.debug(
                    "Skipping out-of-range span %d-%d for key %s in %s",
                    record.start_byte, record.end_byte, record.id, record.file_path,
                )
                continue

            result = result[:record.start_byte] + replacement + result[record.end_byte:]

        return result
