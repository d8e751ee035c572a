from __future__ import annotations

import os
from pathlib import Path

import pytest

from aiinit.adapters.alias_backends import (
    CopyAliasBackend,
    FallbackAliasBackend,
    SymlinkAliasBackend,
    select_alias_backend,
    symlinks_supported,
)
from aiinit.app.scaffold import link_aliases
from aiinit.domain.layout import AliasSpec, ScaffoldLayout
from aiinit.ports.alias_backend import AliasBackend, AliasStatus

ALIASES = (".windsurfrules", ".cursorrules", ".clinerules")


def _specs(*aliases: str) -> list[AliasSpec]:
    return [AliasSpec(canonical="rules.yaml", alias=alias) for alias in aliases or ALIASES]

needs_symlinks = pytest.mark.skipif(not hasattr(os, "symlink") or os.name == "nt", reason="symlinks required")


class _FailingBackend(AliasBackend):
    name = "failing"

    def create(self, canonical: Path, alias: Path) -> AliasStatus:
        raise PermissionError("symlinks not permitted")


def _project(tmp_path: Path) -> Path:
    (tmp_path / "rules.yaml").write_text("rules: []\n", encoding="utf-8")
    return tmp_path


@needs_symlinks
def test_link_aliases_creates_relative_symlinks(tmp_path: Path) -> None:
    root = _project(tmp_path)

    results = link_aliases(root, _specs(), backend=SymlinkAliasBackend())

    assert [result.status for result in results] == [AliasStatus.LINKED] * 3
    for alias in ALIASES:
        link = root / alias
        assert link.is_symlink()
        assert os.readlink(link) == "rules.yaml"
        assert link.read_text(encoding="utf-8") == "rules: []\n"


def test_link_aliases_never_touches_existing_alias(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / ".cursorrules").write_text("sentinel", encoding="utf-8")

    results = link_aliases(root, _specs(), backend=CopyAliasBackend())

    by_alias = {result.alias: result.status for result in results}
    assert by_alias[".cursorrules"] is AliasStatus.SKIPPED_EXISTS
    assert by_alias[".windsurfrules"] is AliasStatus.COPIED
    assert (root / ".cursorrules").read_text(encoding="utf-8") == "sentinel"


@needs_symlinks
def test_link_aliases_keeps_dangling_symlink(tmp_path: Path) -> None:
    root = _project(tmp_path)
    (root / ".clinerules").symlink_to("missing-target")

    results = link_aliases(root, _specs(".clinerules"), backend=SymlinkAliasBackend())

    assert results[0].status is AliasStatus.SKIPPED_EXISTS
    assert os.readlink(root / ".clinerules") == "missing-target"


def test_link_aliases_without_canonical_creates_nothing(tmp_path: Path) -> None:
    results = link_aliases(tmp_path, _specs(), backend=CopyAliasBackend())

    assert {result.status for result in results} == {AliasStatus.SKIPPED_NO_CANONICAL}
    assert not any((tmp_path / alias).exists() for alias in ALIASES)


def test_link_aliases_reports_failures_without_raising(tmp_path: Path) -> None:
    root = _project(tmp_path)
    traced: list[str] = []

    results = link_aliases(root, _specs(), backend=_FailingBackend(), trace=traced.append)

    assert all(result.status is AliasStatus.FAILED for result in results)
    assert all(not result.ok for result in results)
    assert "PermissionError" in (results[0].detail or "")
    assert results[0].to_dict()["status"] == "failed"
    assert len(traced) == 3


def test_fallback_backend_copies_when_primary_fails(tmp_path: Path) -> None:
    root = _project(tmp_path)
    backend = FallbackAliasBackend(_FailingBackend(), CopyAliasBackend())

    results = link_aliases(root, _specs(".cursorrules"), backend=backend)

    assert results[0].status is AliasStatus.COPIED
    assert not (root / ".cursorrules").is_symlink()
    assert (root / ".cursorrules").read_text(encoding="utf-8") == "rules: []\n"


def test_backend_selection_by_platform() -> None:
    assert not symlinks_supported("win32")
    assert isinstance(select_alias_backend("win32"), CopyAliasBackend)
    if hasattr(os, "symlink"):
        backend = select_alias_backend("linux")
        assert isinstance(backend, FallbackAliasBackend)
        assert backend.name == "symlink+copy"


def test_layout_alias_specs_drive_linking(tmp_path: Path) -> None:
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "rules.md").write_text("shared", encoding="utf-8")
    layout = ScaffoldLayout(canonical_file="docs/rules.md", aliases=(".cursorrules",), scaffold_directories=())

    specs = layout.alias_specs()
    results = link_aliases(tmp_path, specs, backend=CopyAliasBackend())

    assert specs == [AliasSpec(canonical="docs/rules.md", alias=".cursorrules")]
    assert results[0].status is AliasStatus.COPIED
    assert (tmp_path / ".cursorrules").read_text(encoding="utf-8") == "shared"
