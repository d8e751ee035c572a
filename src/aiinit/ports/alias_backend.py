"""Port for the alias-creation strategy (symlink, copy, or a chain of both)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path


class AliasStatus(str, Enum):
    LINKED = "linked"
    COPIED = "copied"
    SKIPPED_EXISTS = "skipped-exists"
    SKIPPED_NO_CANONICAL = "skipped-no-canonical"
    FAILED = "failed"


class AliasBackend(ABC):
    name: str = "abstract"

    @abstractmethod
    def create(self, canonical: Path, alias: Path) -> AliasStatus:
        """Create ``alias`` so that it resolves to ``canonical``.

        Returns ``LINKED`` or ``COPIED``; raises ``OSError`` when the alias
        could not be created. The caller guarantees ``alias`` does not exist.
        """
