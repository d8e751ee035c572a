from __future__ import annotations

from pathlib import Path, PurePosixPath

import pytest

from aiinit.domain.layout import CopyPlan, CopyPlanEntry, ScaffoldLayout, ensure_relative
from aiinit.resources import iter_layout_errors, load_scaffold_layout


def test_packaged_layout_loads() -> None:
    layout = load_scaffold_layout()
    assert layout.canonical_file == "rules.yaml"
    assert layout.aliases == (".windsurfrules", ".cursorrules", ".clinerules")
    assert set(layout.scaffold_directories) == {".cursor/rules", "doc-files/adr", "memory-bank", "mem-scripts"}
    assert "package.json" in layout.dependency_manifests
    assert [spec.alias for spec in layout.alias_specs()] == list(layout.aliases)
    assert all(spec.canonical == "rules.yaml" for spec in layout.alias_specs())


def test_layout_schema_reports_problems() -> None:
    problems = list(iter_layout_errors({"aliases": "not-a-list"}))
    messages = " ".join(message for _, message in problems)
    assert "canonical_file" in messages
    assert any(path == "aliases" for path, _ in problems)


def test_layout_from_dict_defaults() -> None:
    layout = ScaffoldLayout.from_dict({"canonical_file": "rules.yaml"})
    assert layout.aliases == ()
    assert layout.scaffold_directories == ()


@pytest.mark.parametrize("value", ["/etc/passwd", "../escape", "a/../../b", "\\share"])
def test_ensure_relative_rejects_escaping_paths(value: str) -> None:
    with pytest.raises(ValueError):
        ensure_relative(value)


def test_copy_plan_maps_sources_to_destination(tmp_path: Path) -> None:
    template = tmp_path / "tpl"
    destination = tmp_path / "out"
    files = [template / "rules.yaml", template / "memory-bank" / "progress.md", template / "a" / "b" / "c.txt"]
    plan = CopyPlan.from_files(template, destination, files)

    assert len(plan) == 3
    assert plan.entries[1].relative == PurePosixPath("memory-bank/progress.md")
    assert plan.entries[1].destination == destination / "memory-bank" / "progress.md"
    assert plan.parent_directories() == {PurePosixPath("memory-bank"), PurePosixPath("a/b")}


def test_copy_plan_entry_rejects_escaping_relative(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CopyPlanEntry(relative=PurePosixPath("../x"), source=tmp_path / "x", destination=tmp_path / "x")
