"""Value objects describing what a scaffolding run materialises."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Iterable


@dataclass(frozen=True)
class AliasSpec:
    """One alias file that should resolve to the canonical rules file."""

    canonical: str
    alias: str


@dataclass(frozen=True)
class ScaffoldLayout:
    """Fixed per-release description of the scaffold."""

    canonical_file: str
    aliases: tuple[str, ...]
    scaffold_directories: tuple[str, ...]
    dependency_manifests: tuple[str, ...] = ()
    required_template_paths: tuple[str, ...] = ()
    forbidden_template_paths: tuple[str, ...] = ()

    def alias_specs(self) -> list[AliasSpec]:
        return [AliasSpec(canonical=self.canonical_file, alias=name) for name in self.aliases]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScaffoldLayout":
        return cls(
            canonical_file=str(data["canonical_file"]),
            aliases=tuple(str(item) for item in data.get("aliases", [])),
            scaffold_directories=tuple(str(item) for item in data.get("scaffold_directories", [])),
            dependency_manifests=tuple(str(item) for item in data.get("dependency_manifests", [])),
            required_template_paths=tuple(str(item) for item in data.get("required_template_paths", [])),
            forbidden_template_paths=tuple(str(item) for item in data.get("forbidden_template_paths", [])),
        )


def ensure_relative(path: PurePosixPath | str) -> PurePosixPath:
    """Reject paths that would escape the root they are joined to."""
    candidate = PurePosixPath(path)
    if candidate.is_absolute() or str(path).startswith("\\"):
        raise ValueError(f"expected a relative path, got {path}")
    if ".." in candidate.parts:
        raise ValueError(f"relative path must not contain '..': {path}")
    return candidate


@dataclass(frozen=True)
class CopyPlanEntry:
    relative: PurePosixPath
    source: Path
    destination: Path

    def __post_init__(self) -> None:
        ensure_relative(self.relative)

    @classmethod
    def build(cls, template_root: Path, source: Path, destination_root: Path) -> "CopyPlanEntry":
        relative = PurePosixPath(source.relative_to(template_root).as_posix())
        return cls(relative=relative, source=source, destination=destination_root.joinpath(*relative.parts))


@dataclass
class CopyPlan:
    template_root: Path
    destination_root: Path
    entries: list[CopyPlanEntry] = field(default_factory=list)

    @classmethod
    def from_files(cls, template_root: Path, destination_root: Path, files: Iterable[Path]) -> "CopyPlan":
        entries = [CopyPlanEntry.build(template_root, path, destination_root) for path in files]
        return cls(template_root=template_root, destination_root=destination_root, entries=entries)

    def parent_directories(self) -> set[PurePosixPath]:
        parents: set[PurePosixPath] = set()
        for entry in self.entries:
            parent = entry.relative.parent
            if parent != PurePosixPath("."):
                parents.add(parent)
        return parents

    def __len__(self) -> int:
        return len(self.entries)


__all__ = ["AliasSpec", "CopyPlan", "CopyPlanEntry", "ScaffoldLayout", "ensure_relative"]
