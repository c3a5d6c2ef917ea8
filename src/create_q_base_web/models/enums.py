"""Enumerated types used across create-q-base-web."""

from __future__ import annotations

from enum import StrEnum


class DirectoryState(StrEnum):
    """Classification of a scaffold target directory."""

    ABSENT = "absent"
    EMPTY = "empty"
    NON_EMPTY = "non_empty"


class OverwriteChoice(StrEnum):
    """How to proceed when the target directory already has content."""

    CANCEL = "cancel"
    CLEAR = "clear"
    IGNORE = "ignore"
