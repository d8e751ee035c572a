"""Human-readable summaries of dependency manifests.

Used when the add flow skips a template manifest because the project already
has one: the operator gets the list of dependencies to merge by hand.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Iterable


def summarize_manifest(path: Path) -> str:
    """Describe the dependencies ``path`` declares, one per line."""
    name = path.name
    try:
        if name == "package.json":
            sections = _package_json_sections(path)
        elif name == "pyproject.toml":
            sections = _pyproject_sections(path)
        else:
            sections = {"requirements": _requirement_lines(path.read_text(encoding="utf-8").splitlines())}
    except (OSError, ValueError) as exc:
        return f"{name}: could not be parsed ({exc}); merge it manually."

    lines = [f"{name} already exists; the template would have declared:"]
    declared = False
    for section, entries in sections.items():
        if not entries:
            continue
        declared = True
        lines.append(f"  {section}:")
        lines.extend(f"    - {entry}" for entry in entries)
    if not declared:
        lines.append("  (no dependencies)")
    return "\n".join(lines)


def _package_json_sections(path: Path) -> dict[str, list[str]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("package.json must contain a JSON object")
    sections: dict[str, list[str]] = {}
    for key in ("dependencies", "devDependencies", "peerDependencies"):
        block = data.get(key) or {}
        if isinstance(block, dict):
            sections[key] = [f"{dep}@{version}" for dep, version in sorted(block.items())]
    return sections


def _pyproject_sections(path: Path) -> dict[str, list[str]]:
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    project = data.get("project") or {}
    sections: dict[str, list[str]] = {"dependencies": [str(item) for item in project.get("dependencies", [])]}
    for extra, items in sorted((project.get("optional-dependencies") or {}).items()):
        sections[f"optional-dependencies.{extra}"] = [str(item) for item in items]
    return sections


def _requirement_lines(lines: Iterable[str]) -> list[str]:
    result: list[str] = []
    for raw in lines:
        line = raw.split("#", 1)[0].strip()
        if line:
            result.append(line)
    return result
