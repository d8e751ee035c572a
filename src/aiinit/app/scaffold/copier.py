"""Copy one template file into the destination, honouring preservation."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path
from aiinit.app.scaffold.manifests import summarize_manifest
from aiinit.domain.errors import InstallerError, InstallerErrorKind


@dataclass(frozen=True)
class CopyOutcome:
    source: Path
    destination: Path
    copied: bool
    manifest_summary: str | None = None


def copy_file(
    src: Path,
    dst: Path,
    preserve_existing: bool,
    *,
    is_manifest: bool = False,
) -> CopyOutcome:
    """Copy ``src`` to ``dst`` byte for byte.

    With ``preserve_existing`` an existing ``dst`` (including a dangling
    symlink) is never touched and ``copied`` is False. When ``is_manifest`` is
    set, a skipped file also carries a summary of what the template file
    declares.
    """
    if preserve_existing and (dst.exists() or dst.is_symlink()):
        summary = summarize_manifest(src) if is_manifest else None
        return CopyOutcome(source=src, destination=dst, copied=False, manifest_summary=summary)

    try:
        dst.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise InstallerError(
            InstallerErrorKind.DIR_CREATE_FAILED,
            f"Failed to create directory {dst.parent}: {exc}",
            {"path": dst.parent, "cause": exc},
        ) from exc
    try:
        # Never write through a link that may point outside the destination.
        if dst.is_symlink():
            dst.unlink()
        shutil.copyfile(src, dst)
    except OSError as exc:
        raise InstallerError(
            InstallerErrorKind.FILE_COPY_FAILED,
            f"Failed to copy {src} to {dst}: {exc}",
            {"path": dst, "source": src, "cause": exc},
        ) from exc
    return CopyOutcome(source=src, destination=dst, copied=True)
