from __future__ import annotations

import pytest

from aiinit.domain.naming import MAX_NAME_LENGTH, validate_project_name


@pytest.mark.parametrize(
    "name",
    ["my-project", "My_Project", "proj.v2", "a", "x" * MAX_NAME_LENGTH, "123"],
)
def test_valid_names(name: str) -> None:
    result = validate_project_name(name)
    assert result.valid
    assert result.errors == ()


def test_empty_name_reports_single_error() -> None:
    result = validate_project_name("")
    assert not result.valid
    assert result.errors == ("name length must be greater than zero",)


def test_path_separators_rejected() -> None:
    for name in ("my/project", "my\\project"):
        result = validate_project_name(name)
        assert not result.valid
        assert "name cannot contain path separators" in result.errors


def test_spaces_and_characters_rejected() -> None:
    result = validate_project_name(" my project ")
    assert "name cannot contain leading or trailing spaces" in result.errors
    assert any("' '" in error for error in result.errors)


def test_too_long_name_rejected() -> None:
    result = validate_project_name("x" * (MAX_NAME_LENGTH + 1))
    assert not result.valid
    assert any(str(MAX_NAME_LENGTH) in error for error in result.errors)


@pytest.mark.parametrize("name", [".", "..", "node_modules", "favicon.ico", "CON", "nul", "com1", "lpt9", "aux.txt"])
def test_reserved_names_rejected(name: str) -> None:
    result = validate_project_name(name)
    assert not result.valid
    assert f"{name} is a reserved name" in result.errors


def test_leading_period_hyphen_underscore_only_rejected_in_strict_mode() -> None:
    assert not validate_project_name(".hidden").valid
    assert not validate_project_name("-flag").valid
    assert validate_project_name("_private").errors == ("name cannot start with an underscore",)
    assert validate_project_name(".hidden", strict=False).valid
    assert validate_project_name("-flag", strict=False).valid
    assert validate_project_name("_private", strict=False).valid


def test_trailing_period_rejected() -> None:
    result = validate_project_name("project.")
    assert result.errors == ("name cannot end with a period",)


def test_errors_are_reported_in_stable_order() -> None:
    result = validate_project_name(" a/b$ ")
    assert result.errors[0] == "name cannot contain leading or trailing spaces"
    assert result.errors[1] == "name cannot contain path separators"
    assert result.errors[2].startswith("name can only contain")
    assert "'$'" in result.errors[2]
    assert "'/'" not in result.errors[2]
