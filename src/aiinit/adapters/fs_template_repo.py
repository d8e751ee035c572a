"""Filesystem-backed template repository."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from aiinit.domain.template import TemplateDescriptor
from aiinit.ports.template_repo import TemplateNotFoundError, TemplateRepository


def packaged_template_dir() -> Path:
    return Path(__file__).resolve().parents[1] / "templates"


class FSTemplateRepository(TemplateRepository):
    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir if base_dir is not None else packaged_template_dir()

    def ensure_available(self, template: str) -> TemplateDescriptor:
        if not template or "/" in template or "\\" in template or template in {".", ".."}:
            raise TemplateNotFoundError(f"Invalid template name: {template!r}")
        root = self._base_dir / template
        if not root.is_dir():
            available = ", ".join(self.list_templates()) or "none"
            raise TemplateNotFoundError(
                f"Template {template} not found under {self._base_dir} (available: {available})"
            )
        descriptor = TemplateDescriptor(name=template, root_dir=root.resolve())
        try:
            descriptor.validate()
        except OSError as exc:
            raise TemplateNotFoundError(str(exc)) from exc
        return descriptor

    def list_templates(self) -> Iterable[str]:
        if not self._base_dir.is_dir():
            return []
        return sorted(p.name for p in self._base_dir.iterdir() if p.is_dir() and not p.name.startswith(("_", ".")))
