"""Template materialisation engine."""

from .aliases import AliasResult, link_aliases
from .copier import CopyOutcome, copy_file
from .directories import ensure_directories
from .enumerate import list_template_files
from .manifests import summarize_manifest

__all__ = [
    "AliasResult",
    "CopyOutcome",
    "copy_file",
    "ensure_directories",
    "link_aliases",
    "list_template_files",
    "summarize_manifest",
]
