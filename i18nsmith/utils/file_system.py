"""
File-system collaborators: source tree scanning and JSON language files.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from ..core.exceptions import FileProcessingError
from ..core.models import FileType

I18N_MARKER = ".i18n."

logger = logging.getLogger(__name__)


def is_i18n_output(path: Path) -> bool:
    return I18N_MARKER in path.name


def create_i18n_filename(path: Path) -> Path:
    """App.tsx -> App.i18n.tsx"""
    return path.with_name(f"{path.stem}.i18n{path.suffix}")


def get_original_path(i18n_path: Path) -> Path:
    """App.i18n.tsx -> App.tsx"""
    name = i18n_path.name
    index = name.find(I18N_MARKER)
    if index == -1:
        return i18n_path
    base_name = name[:index]
    extension = name[index + len(I18N_MARKER):]
    return i18n_path.with_name(f"{base_name}.{extension}")


class FileSystemScanner:
    """Finds supported source files below a directory."""

    def __init__(self, skip_dirs: Optional[Iterable[str]] = None):
        self.skip_dirs = set(skip_dirs if skip_dirs is not None else ("node_modules", "dist", "build", ".git"))

    def scan(self, root: Union[str, Path]) -> List[Tuple[Path, FileType]]:
        root = Path(root)
        if root.is_file():
            file_type = FileType.from_extension(root.suffix)
            return [(root, file_type)] if file_type.is_supported else []

        files: List[Tuple[Path, FileType]] = []
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if d not in self.skip_dirs)
            for filename in sorted(filenames):
                path = Path(dirpath) / filename
                if is_i18n_output(path):
                    continue
                file_type = FileType.from_extension(path.suffix)
                if file_type.is_supported:
                    files.append((path, file_type))

        logger.info("Found %s source files in %s", len(files), root)
        return files


def read_language_file(path: Union[str, Path]) -> Dict[str, str]:
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise FileProcessingError(path, e) from e
    if not isinstance(data, dict):
        raise FileProcessingError(path, ValueError("language file must contain a JSON object"))
    return {str(k): str(v) for k, v in data.items()}


def write_language_file(path: Union[str, Path], translations: Dict[str, str]) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(translations, f, ensure_ascii=False, indent=2, sort_keys=True)
            f.write("\n")
    except OSError as e:
        raise FileProcessingError(path, e) from e
    logger.info("Written %s", path)
