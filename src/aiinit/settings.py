"""Runtime settings for the ai-init CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from aiinit import __version__
from aiinit.adapters.fs_template_repo import packaged_template_dir


@dataclass(frozen=True)
class RuntimeSettings:
    home_dir: Path
    log_dir: Path
    template_dir: Path
    cli_version: str = __version__
    default_template: str = "default"


def _default_home_dir() -> Path:
    override = os.environ.get("AI_INIT_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".ai-init"


def load_settings() -> RuntimeSettings:
    base = _default_home_dir()
    return RuntimeSettings(
        home_dir=base,
        log_dir=base / "logs",
        template_dir=packaged_template_dir(),
    )


SETTINGS = load_settings()
