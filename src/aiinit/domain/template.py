"""A named template tree inside the bundled templates root."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TemplateDescriptor:
    name: str
    root_dir: Path

    def validate(self) -> None:
        if not self.root_dir.exists():
            raise FileNotFoundError(f"Template directory missing: {self.root_dir}")
        if not self.root_dir.is_dir():
            raise NotADirectoryError(f"Template root is not a directory: {self.root_dir}")
