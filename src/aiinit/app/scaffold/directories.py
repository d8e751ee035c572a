"""Creation of the intermediate directories a copy plan needs."""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Iterable

from aiinit.domain.errors import InstallerError, InstallerErrorKind
from aiinit.domain.layout import ensure_relative


def ensure_directories(root: Path, relative_dirs: Iterable[PurePosixPath | str]) -> list[Path]:
    """Create ``relative_dirs`` under ``root``, shallowest first.

    Existing directories are left alone. Returns the directories that did not
    exist before the call. The first failure aborts with ``DIR_CREATE_FAILED``.
    """
    ordered = sorted(
        {ensure_relative(item) for item in relative_dirs},
        key=lambda rel: (len(rel.parts), rel.as_posix()),
    )
    created: list[Path] = []
    for rel in ordered:
        if not rel.parts:
            continue
        target = root.joinpath(*rel.parts)
        if target.is_dir():
            continue
        try:
            target.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise InstallerError(
                InstallerErrorKind.DIR_CREATE_FAILED,
                f"Failed to create directory {target}: {exc}",
                {"path": target, "cause": exc},
            ) from exc
        created.append(target)
    return created
