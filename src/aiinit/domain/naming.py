"""Project/directory name validation.

Names follow portable package-name rules: ASCII letters, digits, ``-``, ``_``
and ``.`` only, at most 214 characters, and never a name the filesystem or
tooling treats specially. Validation is pure; callers decide whether an
invalid result is fatal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

MAX_NAME_LENGTH = 214

_ALLOWED = re.compile(r"^[A-Za-z0-9._-]+$")
_DISALLOWED_CHAR = re.compile(r"[^A-Za-z0-9._-]")
_PATH_SEPARATORS = ("/", "\\")

RESERVED_NAMES = frozenset(
    {
        ".",
        "..",
        "node_modules",
        "favicon.ico",
        "con",
        "prn",
        "aux",
        "nul",
        *(f"com{i}" for i in range(1, 10)),
        *(f"lpt{i}" for i in range(1, 10)),
    }
)


@dataclass(frozen=True)
class NameValidation:
    name: str
    errors: tuple[str, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.errors


def _is_reserved(name: str) -> bool:
    lowered = name.lower()
    if lowered in RESERVED_NAMES:
        return True
    # Windows device names stay reserved with any extension (e.g. "con.txt").
    stem = lowered.split(".", 1)[0]
    return bool(stem) and stem in RESERVED_NAMES and stem not in {".", ".."}


def validate_project_name(name: str, *, strict: bool = True) -> NameValidation:
    """Check ``name`` and return every rule it breaks, in a stable order.

    ``strict`` additionally rejects names starting with a period, hyphen or
    underscore.
    """
    if name is None or name == "":
        return NameValidation(name="", errors=("name length must be greater than zero",))

    errors: list[str] = []
    if name != name.strip():
        errors.append("name cannot contain leading or trailing spaces")
    if len(name) > MAX_NAME_LENGTH:
        errors.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if any(sep in name for sep in _PATH_SEPARATORS):
        errors.append("name cannot contain path separators")
    if strict and name.startswith("."):
        errors.append("name cannot start with a period")
    if strict and name.startswith("-"):
        errors.append("name cannot start with a hyphen")
    if strict and name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.endswith(".") and name not in {".", ".."}:
        errors.append("name cannot end with a period")
    if not _ALLOWED.match(name):
        offending = sorted({ch for ch in _DISALLOWED_CHAR.findall(name) if ch not in _PATH_SEPARATORS})
        if offending:
            listed = ", ".join(repr(ch) for ch in offending)
            errors.append(f"name can only contain letters, digits, '-', '_' and '.' (found {listed})")
    if _is_reserved(name):
        errors.append(f"{name} is a reserved name")
    return NameValidation(name=name, errors=tuple(errors))


__all__ = ["MAX_NAME_LENGTH", "NameValidation", "RESERVED_NAMES", "validate_project_name"]
