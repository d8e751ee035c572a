"""Lookup of bundled templates by name."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from aiinit.domain.template import TemplateDescriptor


class TemplateNotFoundError(RuntimeError):
    pass


class TemplateRepository(ABC):
    @abstractmethod
    def ensure_available(self, template: str) -> TemplateDescriptor:
        """Return descriptor for the named template or raise TemplateNotFoundError."""

    @abstractmethod
    def list_templates(self) -> Iterable[str]:
        """List available template names."""
