"""Application services for ai-init."""

from .bootstrap_service import (  # noqa: F401
    BootstrapService,
    ScaffoldOptions,
    ScaffoldReport,
    add_to_existing,
    create_new,
)

__all__ = ["BootstrapService", "ScaffoldOptions", "ScaffoldReport", "add_to_existing", "create_new"]
