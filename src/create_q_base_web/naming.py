"""Normalization of raw directory and package-name input."""

from __future__ import annotations

import os
import re
from pathlib import Path

# Trailing whitespace is included so a run like "app/ /" is stripped in one pass.
_TRAILING_SEPARATORS_RE = re.compile(r"[\s/]+$")

_PACKAGE_NAME_RE = re.compile(r"(?:@[a-z0-9\-*~][a-z0-9\-*._~]*/)?[a-z0-9\-~][a-z0-9\-._~]*")

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_DOT_OR_UNDERSCORE_RE = re.compile(r"^[._]")
_INVALID_CHARS_RE = re.compile(r"[^a-z0-9\-~]+")


def format_target_dir(raw: str) -> str:
    """Trim *raw* and drop any trailing path separators."""
    return _TRAILING_SEPARATORS_RE.sub("", raw.strip())


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` when *name* is a valid (optionally scoped) npm package name."""
    return _PACKAGE_NAME_RE.fullmatch(name) is not None


def to_valid_package_name(raw: str) -> str:
    """Best-effort conversion of *raw* into a valid npm package name.

    The result can still be empty (e.g. ``"!!!"`` becomes ``"-"`` but ``"."``
    becomes ``""``), so callers must re-validate it with
    :func:`is_valid_package_name`.
    """
    name = raw.strip().lower()
    name = _WHITESPACE_RE.sub("-", name)
    name = _LEADING_DOT_OR_UNDERSCORE_RE.sub("", name, count=1)
    return _INVALID_CHARS_RE.sub("-", name)


def package_name_for(target_dir: str, cwd: Path) -> str:
    """Default package name for *target_dir*: the basename of its absolute path.

    Symlinks are not followed, so a linked target keeps its own name.
    """
    return Path(os.path.abspath(cwd / target_dir)).name
