"""Checks run by the CLI before touching a project directory."""

from __future__ import annotations

from pathlib import Path

from aiinit.domain.layout import ScaffoldLayout


def is_directory_empty_or_missing(path: Path) -> bool:
    """True when ``path`` does not exist or is an empty directory.

    Raises ``NotADirectoryError`` for an existing non-directory and lets other
    ``OSError``s (e.g. permission denied) propagate.
    """
    if not path.exists() and not path.is_symlink():
        return True
    if not path.is_dir():
        raise NotADirectoryError(f"{path} exists and is not a directory")
    return not any(path.iterdir())


def validate_existing_project(path: Path, layout: ScaffoldLayout) -> list[str]:
    """Warnings about scaffold content that already exists and will be preserved."""
    warnings: list[str] = []
    if (path / layout.canonical_file).exists():
        warnings.append(f"Project already has {layout.canonical_file} file. It will be preserved.")
    for directory in layout.scaffold_directories:
        if (path / directory).exists():
            warnings.append(
                f"Project already has {directory} directory. Existing files will be preserved."
            )
    for alias in layout.aliases:
        if (path / alias).exists() or (path / alias).is_symlink():
            warnings.append(f"Project already has {alias}. It will not be relinked.")
    return warnings
