"""Alias files (.cursorrules and friends) pointing at the canonical rules file."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from aiinit.adapters.alias_backends import select_alias_backend
from aiinit.domain.layout import AliasSpec, ensure_relative
from aiinit.ports.alias_backend import AliasBackend, AliasStatus


@dataclass(frozen=True)
class AliasResult:
    alias: str
    status: AliasStatus
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is not AliasStatus.FAILED

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"alias": self.alias, "status": self.status.value}
        if self.detail:
            payload["detail"] = self.detail
        return payload


def link_aliases(
    root: Path,
    specs: Iterable[AliasSpec],
    *,
    backend: AliasBackend | None = None,
    trace: Optional[Callable[[str], None]] = None,
) -> list[AliasResult]:
    """Create each ``spec.alias`` under ``root`` unless it already exists.

    Failures are reported per alias and never raised.
    """
    backend = backend or select_alias_backend()
    results: list[AliasResult] = []
    for spec in specs:
        name = spec.alias
        canonical_path = root.joinpath(*ensure_relative(spec.canonical).parts)
        alias_path = root.joinpath(*ensure_relative(name).parts)
        if not canonical_path.is_file():
            result = AliasResult(name, AliasStatus.SKIPPED_NO_CANONICAL, f"{spec.canonical} not found")
        elif alias_path.exists() or alias_path.is_symlink():
            result = AliasResult(name, AliasStatus.SKIPPED_EXISTS)
        else:
            try:
                status = backend.create(canonical_path, alias_path)
            except (OSError, NotImplementedError) as exc:
                result = AliasResult(name, AliasStatus.FAILED, f"{type(exc).__name__}: {exc}")
            else:
                result = AliasResult(name, status)
        if trace:
            trace(f"Alias {name}: {result.status.value}")
        results.append(result)
    return results
