"""Tests for target-directory and package-name normalization."""

from __future__ import annotations

from pathlib import Path

import pytest

from create_q_base_web.naming import (
    format_target_dir,
    is_valid_package_name,
    package_name_for,
    to_valid_package_name,
)


class TestFormatTargetDir:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("my-app", "my-app"),
            ("  my-app  ", "my-app"),
            ("my-app/", "my-app"),
            ("my-app///", "my-app"),
            ("nested/my-app//", "nested/my-app"),
            ("  my app / ", "my app"),
            ("my-app/ /", "my-app"),
            ("///", ""),
            ("", ""),
        ],
    )
    def test_trims_and_strips_trailing_separators(self, raw: str, expected: str) -> None:
        assert format_target_dir(raw) == expected

    @pytest.mark.parametrize("raw", ["a/", " b / / ", "c d", "  ", "/abs/path/", "x/ /\t/"])
    def test_idempotent(self, raw: str) -> None:
        once = format_target_dir(raw)
        assert format_target_dir(once) == once

    def test_interior_whitespace_preserved(self) -> None:
        assert format_target_dir("  my   app  ") == "my   app"


class TestIsValidPackageName:
    @pytest.mark.parametrize("name", ["my-app", "@scope/name-1", "a.b_c~d", "123", "~tilde", "@my-org/pkg"])
    def test_valid(self, name: str) -> None:
        assert is_valid_package_name(name) is True

    @pytest.mark.parametrize(
        "name",
        ["UPPER", ".starts-with-dot", "_underscore", "my app", "", "@scope/", "@Scope/name", "name\n"],
    )
    def test_invalid(self, name: str) -> None:
        assert is_valid_package_name(name) is False


class TestToValidPackageName:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("My App", "my-app"),
            ("  Spaced   Out  ", "spaced-out"),
            (".hidden", "hidden"),
            ("_private", "private"),
            ("foo@bar!baz", "foo-bar-baz"),
            ("a.b_c", "a-b-c"),
            ("already-valid", "already-valid"),
        ],
    )
    def test_normalizes(self, raw: str, expected: str) -> None:
        assert to_valid_package_name(raw) == expected

    @pytest.mark.parametrize("raw", ["My App", "..dots", "__x", "Ünïcode Náme", "!!!", "a/b\\c", "  ~Tilde  "])
    def test_non_empty_results_are_valid(self, raw: str) -> None:
        result = to_valid_package_name(raw)
        assert result
        assert is_valid_package_name(result)

    def test_result_can_be_empty(self) -> None:
        assert to_valid_package_name(".") == ""
        assert is_valid_package_name(to_valid_package_name(".")) is False


def test_package_name_for_uses_absolute_basename(tmp_path: Path) -> None:
    cwd = tmp_path / "Workspace"
    cwd.mkdir()

    assert package_name_for("my-app", cwd) == "my-app"
    assert package_name_for("nested/inner", cwd) == "inner"
    assert package_name_for(".", cwd) == "Workspace"


def test_package_name_for_does_not_follow_symlinks(tmp_path: Path) -> None:
    cwd = tmp_path / "Workspace"
    (cwd / "real-dir").mkdir(parents=True)
    try:
        (cwd / "linked-app").symlink_to(cwd / "real-dir", target_is_directory=True)
    except OSError:
        pytest.skip("symlinks not supported")

    assert package_name_for("linked-app", cwd) == "linked-app"
    assert package_name_for("linked-app/../other", cwd) == "other"
