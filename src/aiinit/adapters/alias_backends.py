"""Alias backends: symbolic links where the platform allows, copies otherwise."""

from __future__ import annotations

import os
import shutil
import sys
from pathlib import Path

from aiinit.ports.alias_backend import AliasBackend, AliasStatus


class SymlinkAliasBackend(AliasBackend):
    name = "symlink"

    def create(self, canonical: Path, alias: Path) -> AliasStatus:
        # Relative target keeps the link valid when the project is moved.
        target = os.path.relpath(canonical, alias.parent)
        alias.symlink_to(target)
        return AliasStatus.LINKED


class CopyAliasBackend(AliasBackend):
    name = "copy"

    def create(self, canonical: Path, alias: Path) -> AliasStatus:
        shutil.copyfile(canonical, alias)
        return AliasStatus.COPIED


class FallbackAliasBackend(AliasBackend):
    """Try ``primary``; on OSError/NotImplementedError use ``fallback``."""

    def __init__(self, primary: AliasBackend, fallback: AliasBackend) -> None:
        self._primary = primary
        self._fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    def create(self, canonical: Path, alias: Path) -> AliasStatus:
        try:
            return self._primary.create(canonical, alias)
        except (OSError, NotImplementedError):
            if alias.is_symlink():
                alias.unlink()
            return self._fallback.create(canonical, alias)


def symlinks_supported(platform: str | None = None) -> bool:
    platform = platform if platform is not None else sys.platform
    if platform == "win32":
        return False
    return hasattr(os, "symlink")


def select_alias_backend(platform: str | None = None) -> AliasBackend:
    if symlinks_supported(platform):
        return FallbackAliasBackend(SymlinkAliasBackend(), CopyAliasBackend())
    return CopyAliasBackend()


__all__ = [
    "CopyAliasBackend",
    "FallbackAliasBackend",
    "SymlinkAliasBackend",
    "select_alias_backend",
    "symlinks_supported",
]
