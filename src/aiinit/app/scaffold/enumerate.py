"""Recursive listing of the files inside a template root."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Optional

Trace = Optional[Callable[[str], None]]


def list_template_files(root: Path, *, trace: Trace = None) -> list[Path]:
    """Return every regular file under ``root``, sorted by relative path.

    Directory symlinks are followed, but a directory that is already one of
    its own ancestors (a link cycle) is skipped. Raises ``FileNotFoundError``
    or ``NotADirectoryError`` when ``root`` is unusable, ``OSError`` when a
    directory cannot be read.
    """
    if not root.exists():
        raise FileNotFoundError(f"Template root does not exist: {root}")
    if not root.is_dir():
        raise NotADirectoryError(f"Template root is not a directory: {root}")
    files: list[Path] = []
    _walk(root, root, frozenset(), files, trace)
    files.sort(key=lambda path: path.relative_to(root).as_posix())
    return files


def _walk(
    root: Path,
    directory: Path,
    ancestors: frozenset[tuple[int, int]],
    files: list[Path],
    trace: Trace,
) -> None:
    info = directory.stat()
    key = (info.st_dev, info.st_ino)
    if key in ancestors:
        if trace:
            trace(f"Skipping symlink cycle: {directory.relative_to(root).as_posix()}")
        return
    ancestors = ancestors | {key}
    for entry in sorted(directory.iterdir(), key=lambda path: path.name):
        if entry.is_dir():
            _walk(root, entry, ancestors, files, trace)
        elif entry.is_file():
            files.append(entry)
        elif trace:
            trace(f"Skipping non-regular entry: {entry.relative_to(root).as_posix()}")
