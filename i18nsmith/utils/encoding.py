"""
Encoding helpers to read/write source text defensively without crashing on bad bytes.
"""

from __future__ import annotations

import chardet
from pathlib import Path
from typing import Optional, Tuple

from ..core.exceptions import FileProcessingError


def _decode(raw: bytes, preferred: Tuple[str, ...]) -> str:
    for enc in preferred:
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue

    detected = chardet.detect(raw)
    enc = detected.get("encoding") or "utf-8"
    try:
        return raw.decode(enc, errors="replace")
    except LookupError:
        return raw.decode("utf-8", errors="replace")


def read_text_safely(path: Path, preferred: Tuple[str, ...] = ("utf-8-sig", "utf-8")) -> Optional[str]:
    """
    Read file as text with tolerant fallbacks:
    - try preferred encodings first
    - then chardet detection with errors='replace'
    Returns None on I/O failure.
    """
    try:
        raw = path.read_bytes()
    except OSError:
        return None
    return _decode(raw, preferred)


def read_source_file(path: Path) -> str:
    """Like read_text_safely, but raises FileProcessingError carrying the OSError."""
    try:
        raw = path.read_bytes()
    except OSError as e:
        raise FileProcessingError(path, e) from e
    return _decode(raw, ("utf-8-sig", "utf-8"))


def write_text(path: Path, text: str) -> None:
    """Write UTF-8 text, keeping the file's newlines as they are in ``text``."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8", newline="")
    except OSError as e:
        raise FileProcessingError(path, e) from e
