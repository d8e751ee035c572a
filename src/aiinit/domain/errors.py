"""Typed failures raised by the scaffolding engine."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Any


class InstallerErrorKind(str, Enum):
    INVALID_NAME = "INVALID_NAME"
    DIR_NOT_EMPTY = "DIR_NOT_EMPTY"
    INVALID_TARGET = "INVALID_TARGET"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    DIR_CREATE_FAILED = "DIR_CREATE_FAILED"
    FILE_COPY_FAILED = "FILE_COPY_FAILED"
    CANCELLED = "CANCELLED"


class InstallerError(RuntimeError):
    """Raised when a scaffolding run cannot complete.

    ``kind`` is the machine-readable category, ``details`` carries structured
    context such as the list of name validation errors, the offending path or
    the wrapped lower-level exception (``details["cause"]``).
    """

    def __init__(
        self,
        kind: InstallerErrorKind,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details: dict[str, Any] = dict(details or {})

    @property
    def errors(self) -> list[str]:
        return list(self.details.get("errors", []))

    @property
    def path(self) -> str | None:
        value = self.details.get("path")
        return str(value) if value is not None else None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        for key, value in self.details.items():
            if key == "cause":
                payload["cause"] = f"{type(value).__name__}: {value}"
            elif key == "report":
                payload["report"] = value.to_dict() if hasattr(value, "to_dict") else value
            elif isinstance(value, Path):
                payload[key] = str(value)
            else:
                payload[key] = value
        return payload

    def __repr__(self) -> str:
        return f"InstallerError({self.kind.value}, {self.message!r})"


__all__ = ["InstallerError", "InstallerErrorKind"]
