"""Run telemetry for the ai-init CLI (opt-out with AI_INIT_TELEMETRY=0).

One JSON line per scaffolding run is appended to ``<log_dir>/telemetry.jsonl``.
Records never leave the machine and never include file contents.
"""

from __future__ import annotations

import json
import os
import time
from functools import lru_cache
from typing import Any, Iterator

from jsonschema import Draft202012Validator

from aiinit.resources import load_schema
from aiinit.settings import RuntimeSettings

LOG_NAME = "telemetry.jsonl"

_DISABLE_VALUES = {"0", "false", "no", "off"}


def telemetry_enabled() -> bool:
    return os.getenv("AI_INIT_TELEMETRY", "1").lower() not in _DISABLE_VALUES


def record_run(
    settings: RuntimeSettings,
    event: str,
    *,
    status: str,
    duration_ms: float,
    payload: dict[str, Any] | None = None,
    component: str = "cli",
) -> None:
    """Append one run record; a no-op when telemetry is disabled.

    Raises ``jsonschema.ValidationError`` for a malformed record and
    ``OSError`` when the log cannot be written.
    """
    if not telemetry_enabled():
        return
    record: dict[str, Any] = {
        "ts": time.time(),
        "event": event,
        "level": "info" if status == "ok" else "error",
        "status": status,
        "component": component,
        "durationMs": max(0.0, float(duration_ms)),
        "version": settings.cli_version,
        "payload": payload or {},
    }
    _validator().validate(record)
    log_path = settings.log_dir / LOG_NAME
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("a", encoding="utf-8") as fh:
        fh.write(json.dumps(record, ensure_ascii=False) + "\n")


def iter_events(settings: RuntimeSettings) -> Iterator[dict[str, Any]]:
    """Yield recorded runs, oldest first. Unparseable lines are skipped."""
    log_path = settings.log_dir / LOG_NAME
    if not log_path.exists():
        return
    with log_path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError:
                continue


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema("telemetry.schema.json"))
