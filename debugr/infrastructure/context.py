"""File context loading for prompts."""

import os
from pathlib import Path
from typing import Union

from debugr.domain.models import File, FileContext
from debugr.domain.prompt import detect_language


class ContextError(Exception):
    """Raised when a context file or directory cannot be read"""
    pass


def _read_file(path: Path) -> File:
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise ContextError(f"Failed to read context file {path}: {e}") from e
    return File(path=str(path), content=content, language=detect_language(str(path)))


def load_file_context(path: Union[str, Path]) -> FileContext:
    """Load a single file as context."""
    return FileContext(files=[_read_file(Path(path))])


def load_directory_context(path: Union[str, Path]) -> FileContext:
    """Recursively load every regular file under a directory, in sorted order."""
    root = Path(path)
    if not root.is_dir():
        raise ContextError(f"Failed to read context directory {root}: not a directory")

    def _raise(err: OSError):
        raise ContextError(f"Failed to read context directory {root}: {err}") from err

    files = []
    for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
        dirnames.sort()
        for name in sorted(filenames):
            file_path = Path(dirpath) / name
            if file_path.is_file():
                files.append(_read_file(file_path))
    return FileContext(files=files)
