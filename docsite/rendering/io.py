"""File I/O operations for building a site."""

from __future__ import annotations

import contextlib
import os
import shutil
import tempfile
from pathlib import Path


def ensure_parent(path: Path) -> None:
    """Ensure parent directories exist for the given path.

    Args:
        path: Path whose parent directories should be created
    """
    path.parent.mkdir(parents=True, exist_ok=True)


def atomic_write_text(path: Path, text: str, mode: int = 0o644) -> None:
    """Write text to a file atomically using a temporary file.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_parent(path)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=str(path.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        os.replace(tmp_name, path)
        os.chmod(path, mode)
    finally:
        with contextlib.suppress(FileNotFoundError):
            os.remove(tmp_name)


def copy_verbatim(source: Path, destination: Path) -> list[Path]:
    """Copy a file or directory tree byte-for-byte.

    Existing files at the destination are overwritten.

    Args:
        source: File or directory to copy
        destination: Target path for the copy

    Returns:
        Every file written, in traversal order
    """
    if source.is_dir():
        shutil.copytree(source, destination, dirs_exist_ok=True)
        return [
            destination / p.relative_to(source)
            for p in sorted(source.rglob("*"))
            if p.is_file()
        ]

    ensure_parent(destination)
    shutil.copy2(source, destination)
    return [destination]
