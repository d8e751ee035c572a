"""Domain primitives for the scaffolding engine."""

from __future__ import annotations

from .errors import InstallerError, InstallerErrorKind
from .layout import AliasSpec, CopyPlan, CopyPlanEntry, ScaffoldLayout
from .naming import NameValidation, validate_project_name
from .template import TemplateDescriptor

__all__ = [
    "AliasSpec",
    "CopyPlan",
    "CopyPlanEntry",
    "InstallerError",
    "InstallerErrorKind",
    "NameValidation",
    "ScaffoldLayout",
    "TemplateDescriptor",
    "validate_project_name",
]
