"""Package manager detection and command rewriting.

The invoking package manager is read from the ``npm_config_user_agent``
string (e.g. ``"pnpm/8.6.0 npm/? node/v20.3.0 linux x64"``). Generic
``npm create`` / ``npm exec`` command templates are then rewritten into the
syntax of that manager.
"""

from __future__ import annotations

import logging
import re

from create_q_base_web.models.scaffold import PackageManagerInfo

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_MANAGER = "npm"
TARGET_DIR_PLACEHOLDER = "TARGET_DIR"

_NPM_CREATE_RE = re.compile(r"^npm create (?:-- )?")
_NPM_EXEC_RE = re.compile(r"^npm exec")
_LATEST_TAG = "@latest"


def resolve_package_manager(user_agent: str | None) -> PackageManagerInfo | None:
    """Parse the first ``<name>/<version>`` token of *user_agent*.

    Returns ``None`` when *user_agent* is empty or absent.
    """
    if not user_agent or not user_agent.strip():
        return None
    pkg_spec = user_agent.split()[0]
    name, _, version = pkg_spec.partition("/")
    return PackageManagerInfo(name=name, version=version)


def package_manager_name(info: PackageManagerInfo | None, default: str = DEFAULT_PACKAGE_MANAGER) -> str:
    return info.name if info is not None else default


def rewrite_command(command: str, info: PackageManagerInfo | None) -> str:
    """Rewrite a generic ``npm create``/``npm exec`` command for the detected manager.

    Each rule rewrites at most one anchored occurrence, so text produced by an
    earlier rule is never matched again by a later one. ``TARGET_DIR`` is left
    in place; see :func:`build_delegate_argv`.
    """
    manager = package_manager_name(info)
    is_yarn1 = info is not None and info.is_yarn1

    def _create_prefix(match: re.Match[str]) -> str:
        if manager == "bun":
            return "bun x create-"
        if manager == "pnpm":
            return "pnpm create "
        if match.group(0).endswith("-- "):
            return f"{manager} create -- "
        return f"{manager} create "

    def _exec_prefix(_match: re.Match[str]) -> str:
        if manager == "pnpm":
            return "pnpm dlx"
        if manager == "yarn" and not is_yarn1:
            return "yarn dlx"
        if manager == "bun":
            return "bun x"
        return "npm exec"

    rewritten = _NPM_CREATE_RE.sub(_create_prefix, command, count=1)
    if is_yarn1:
        rewritten = rewritten.replace(_LATEST_TAG, "", 1)
    rewritten = _NPM_EXEC_RE.sub(_exec_prefix, rewritten, count=1)
    logger.debug("rewrote %r for %s: %r", command, manager, rewritten)
    return rewritten


def build_delegate_argv(command: str, target_dir: str) -> list[str]:
    """Split *command* into ``[program, *args]`` and substitute the target directory.

    The placeholder is replaced in argument tokens only, never in the program name.
    """
    program, *args = command.split(" ")
    return [program, *(arg.replace(TARGET_DIR_PLACEHOLDER, target_dir) for arg in args)]


def command_hint(command: str, info: PackageManagerInfo | None) -> str:
    """Rewritten command as shown next to a delegate variant, without the placeholder."""
    rewritten = rewrite_command(command, info)
    suffix = f" {TARGET_DIR_PLACEHOLDER}"
    if rewritten.endswith(suffix):
        return rewritten[: -len(suffix)]
    return rewritten


def next_step_commands(manager: str) -> list[str]:
    """Install and dev-server commands to suggest once the project exists."""
    if manager == "yarn":
        return ["yarn", "yarn dev"]
    return [f"{manager} install", f"{manager} run dev"]


__all__ = [
    "DEFAULT_PACKAGE_MANAGER",
    "TARGET_DIR_PLACEHOLDER",
    "build_delegate_argv",
    "command_hint",
    "next_step_commands",
    "package_manager_name",
    "resolve_package_manager",
    "rewrite_command",
]
