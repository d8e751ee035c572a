from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
SANDBOX_HOME = ROOT / ".test_place" / "global-home"
os.environ.setdefault("AI_INIT_HOME", str(SANDBOX_HOME))
SANDBOX_HOME.mkdir(parents=True, exist_ok=True)
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def write(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture()
def template_root(tmp_path: Path) -> Path:
    """A small template tree shaped like the bundled one."""
    root = tmp_path / "templates"
    base = root / "default"
    write(base / "rules.yaml", "rules:\n  - be precise\n")
    write(base / ".cursor" / "rules" / "core.mdc", "core\n")
    write(base / "doc-files" / "adr" / "template.md", "# ADR\n")
    write(base / "memory-bank" / "progress.md", "# Progress\n")
    write(base / "mem-scripts" / "memory-status.sh", "#!/bin/sh\necho ok\n")
    return root


@pytest.fixture()
def workspace(tmp_path: Path) -> Path:
    path = tmp_path / "workspace"
    path.mkdir()
    return path
