"""Helpers for the LF-terminated, UTF-8, one-record-per-line data files.

Every call opens the file, does its work and closes it before returning.
A missing file reads as empty; any other OSError propagates.
"""
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List

from pantrypal.domain.errors import InvalidFieldError

logger = logging.getLogger(__name__)


def read_lines(path: Path) -> List[str]:
    """Return every line of ``path`` without its terminator ([] if absent)."""
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            return [line.rstrip('\r\n') for line in f]
    except FileNotFoundError:
        logger.debug(f"Data file not found: {path}. Treating as empty.")
        return []


def append_line(path: Path, line: str) -> None:
    """Append one record, creating the parent directory and the file if needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'a', encoding='utf-8', newline='\n') as f:
        f.write(line + '\n')


def rewrite_lines(path: Path, lines: Iterable[str]) -> None:
    """Replace the whole file with ``lines`` via a temp file in the same directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.stem}_", suffix=path.suffix)
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as tmp:
            for line in lines:
                tmp.write(line + '\n')
        shutil.move(tmp_path, str(path))
    finally:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)


def check_text_field(field: str, value: str, allow_comma: bool = False) -> str:
    """Reject values the unquoted row format cannot hold."""
    if not isinstance(value, str):
        raise InvalidFieldError(field, str(value), "must be text")
    if '\n' in value or '\r' in value:
        raise InvalidFieldError(field, value, "line breaks are not allowed")
    if not allow_comma and ',' in value:
        raise InvalidFieldError(field, value, "commas are not allowed")
    return value


__all__ = ['read_lines', 'append_line', 'rewrite_lines', 'check_text_field']
