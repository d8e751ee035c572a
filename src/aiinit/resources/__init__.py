"""Packaged resources for ai-init."""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Any, Iterator, Tuple

import yaml
from jsonschema import Draft202012Validator

from aiinit.domain.layout import ScaffoldLayout

__all__ = ["iter_layout_errors", "load_scaffold_layout", "load_schema"]

_LAYOUT_RESOURCE = "scaffold.yaml"
_LAYOUT_SCHEMA = "scaffold.schema.json"


@lru_cache(maxsize=None)
def load_schema(name: str) -> dict[str, Any]:
    resource = resources.files(__name__) / name
    with resource.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def iter_layout_errors(payload: Any) -> Iterator[Tuple[str, str]]:
    """Yield (path, message) pairs for schema issues in a layout payload."""
    validator = Draft202012Validator(load_schema(_LAYOUT_SCHEMA))
    for error in validator.iter_errors(payload):
        path = ".".join(str(item) for item in error.absolute_path)
        yield path, error.message


@lru_cache(maxsize=1)
def load_scaffold_layout() -> ScaffoldLayout:
    """Return the scaffold layout shipped with the package."""

    raw = (resources.files(__name__) / _LAYOUT_RESOURCE).read_text("utf-8")
    payload = yaml.safe_load(raw) or {}
    problems = [f"{path or '<root>'}: {message}" for path, message in iter_layout_errors(payload)]
    if problems:
        raise ValueError("invalid scaffold layout: " + "; ".join(problems))
    return ScaffoldLayout.from_dict(payload)
