from __future__ import annotations

import tempfile
from pathlib import Path

from hypothesis import given, settings
from hypothesis import strategies as st

from aiinit.app.scaffold import list_template_files
from aiinit.domain.naming import MAX_NAME_LENGTH, RESERVED_NAMES, validate_project_name

SAFE_FIRST = st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789")
SAFE_REST = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-_", max_size=40)


@settings(max_examples=200)
@given(name=st.text(max_size=240))
def test_validation_is_deterministic_and_consistent(name: str) -> None:
    first = validate_project_name(name)
    second = validate_project_name(name)
    assert first == second
    assert first.valid == (not first.errors)
    if "/" in name or "\\" in name:
        assert "name cannot contain path separators" in first.errors
    if len(name) > MAX_NAME_LENGTH:
        assert not first.valid


@settings(max_examples=200)
@given(first=SAFE_FIRST, rest=SAFE_REST)
def test_safe_names_are_accepted(first: str, rest: str) -> None:
    name = first + rest
    stem = name.lower().split(".", 1)[0]
    if name.lower() in RESERVED_NAMES or stem in RESERVED_NAMES:
        return
    assert validate_project_name(name).valid


@settings(max_examples=50, deadline=None)
@given(
    paths=st.sets(
        st.lists(st.text(alphabet="abcxyz", min_size=1, max_size=4), min_size=1, max_size=3).map("/".join),
        max_size=8,
    )
)
def test_enumeration_is_order_stable(paths: set[str]) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        written: set[str] = set()
        for rel in sorted(paths, key=len):
            target = root / rel
            if any(Path(root, *Path(rel).parts[: i + 1]).is_file() for i in range(len(Path(rel).parts) - 1)):
                continue
            if target.exists():
                continue
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(rel, encoding="utf-8")
            written.add(rel)

        listed = [path.relative_to(root).as_posix() for path in list_template_files(root)]

        assert listed == sorted(written)
        assert listed == [path.relative_to(root).as_posix() for path in list_template_files(root)]
