"""Target directory inspection and clearing."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from create_q_base_web.models.enums import DirectoryState

logger = logging.getLogger(__name__)

# Version-control metadata survives clearing and does not make a directory "non-empty".
VCS_DIR = ".git"


def classify(path: Path) -> DirectoryState:
    """Classify *path* as absent, empty or non-empty.

    A directory whose only entry is ``.git`` counts as empty.
    """
    if not path.exists():
        return DirectoryState.ABSENT
    names = [entry.name for entry in path.iterdir()]
    if not names or names == [VCS_DIR]:
        state = DirectoryState.EMPTY
    else:
        state = DirectoryState.NON_EMPTY
    logger.debug("target %s is %s", path, state)
    return state


def clear(path: Path) -> None:
    """Delete everything under *path* except ``.git``.

    Symlinks are unlinked, never followed. A missing *path* is a no-op.
    """
    if not path.exists():
        return
    for entry in path.iterdir():
        if entry.name == VCS_DIR:
            continue
        logger.debug("removing %s", entry)
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink(missing_ok=True)


__all__ = ["VCS_DIR", "classify", "clear"]
