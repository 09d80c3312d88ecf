"""
String extractor: scanner + candidate filter + key derivation.

Two views of the same scan are offered. ``extract`` is used when building
a language file and keeps one record per key (first occurrence wins).
``extract_with_positions`` is used when rewriting and keeps every accepted
occurrence, so all places that share a key get replaced.

Spans reported by different scanner passes may cover the same characters
(an ``alt="..."`` value is also a double-quoted string, and a stray
apostrophe in markup text pairs up with the next one into a bogus
single-quoted literal). Overlaps are settled by ``PASS_PRECEDENCE``:
double-quoted literals, then markup text, then single-quoted, then
template literals; within a rank the earlier candidate wins. Records are
still returned in scan order.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from .filters import CandidateFilter
from .keys import derive_key
from .models import QuoteType, TranslationKey, TranslationKeyWithPosition
from .scanner import Candidate, LexicalScanner

# Lower rank wins when spans overlap. Attribute values are DOUBLE and lose to
# the enclosing double-quoted literal, which is scanned first.
PASS_PRECEDENCE = {
    QuoteType.DOUBLE: 0,
    QuoteType.JSX_TEXT: 1,
    QuoteType.SINGLE: 2,
    QuoteType.TEMPLATE: 3,
}


class StringExtractor:
    def __init__(
        self,
        scanner: Optional[LexicalScanner] = None,
        candidate_filter: Optional[CandidateFilter] = None,
    ):
        self.logger = logging.getLogger(__name__)
        self.scanner = scanner or LexicalScanner()
        self.candidate_filter = candidate_filter or CandidateFilter()

    def extract(self, content: str, file_path: str = "") -> List[TranslationKey]:
        seen: Set[str] = set()
        keys: List[TranslationKey] = []
        for record in self.extract_with_positions(content, file_path):
            if record.id in seen:
                continue
            seen.add(record.id)
            keys.append(record.to_key())
        return keys

    def extract_with_positions(self, content: str, file_path: str = "") -> List[TranslationKeyWithPosition]:
        candidates = self.scanner.scan(content)
        ranked = sorted(range(len(candidates)), key=lambda i: (PASS_PRECEDENCE[candidates[i].quote_type], i))

        accepted: Dict[int, TranslationKeyWithPosition] = {}
        accepted_spans: List[Tuple[int, int]] = []

        for index in ranked:
            candidate = candidates[index]
            if not self.candidate_filter.should_extract(candidate.text):
                continue

            key = derive_key(candidate.text)
            if not key:
                self.logger.debug("No key derivable from %r in %s", candidate.text, file_path)
                continue

            if self._overlaps(candidate, accepted_spans):
                self.logger.debug(
                    "Skipping %s candidate %r at %d-%d in %s: overlaps a stronger match",
                    candidate.quote_type.value, candidate.text, candidate.start, candidate.end, file_path,
                )
                continue

            accepted_spans.append((candidate.start, candidate.end))
            accepted[index] = TranslationKeyWithPosition(
                id=key,
                source=candidate.text,
                file_path=file_path,
                line=content.count('\n', 0, candidate.start) + 1,
                start_byte=candidate.start,
                end_byte=candidate.end,
                quote_type=candidate.quote_type,
            )

        # Report in scan order
        return [accepted[index] for index in sorted(accepted)]

    def extract_file(self, file_path: Union[str, Path]) -> List[TranslationKeyWithPosition]:
        from ..utils.encoding import read_source_file

        content = read_source_file(Path(file_path))
        return self.extract_with_positions(content, str(file_path))

    def _overlaps(self, candidate: Candidate, spans: List[Tuple[int, int]]) -> bool:
        return any(candidate.start < end and start < candidate.end for start, end in spans)
