"""Run configuration.

:class:`ScaffoldOptions` carries the parsed command-line flags and
:class:`ScaffoldSettings` the environment and install layout. Both are built
once at the entry point and handed to the orchestrator explicitly.
"""

from __future__ import annotations

import argparse
import os
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from create_q_base_web.naming import format_target_dir
from create_q_base_web.package_manager import DEFAULT_PACKAGE_MANAGER

USER_AGENT_ENV = "npm_config_user_agent"
DEFAULT_TARGET_DIR = "q-base-web"
BUNDLED_TEMPLATES_ROOT = Path(__file__).resolve().parent / "templates"


class ScaffoldOptions(BaseModel):
    """Command-line flags for a single run.

    Attributes:
        target_dir: Positional target directory, already formatted; ``None`` to prompt.
        template: Requested template id; may be unknown, in which case the user is re-prompted.
        overwrite: Clear a non-empty target without asking.
    """

    model_config = ConfigDict(frozen=True)

    target_dir: str | None = None
    template: str | None = None
    overwrite: bool = False

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> ScaffoldOptions:
        target_dir = format_target_dir(args.directory) if args.directory else None
        return cls(target_dir=target_dir or None, template=args.template, overwrite=args.overwrite)


class ScaffoldSettings(BaseModel):
    """Environment-derived settings for a run."""

    model_config = ConfigDict(frozen=True)

    cwd: Path
    templates_root: Path = BUNDLED_TEMPLATES_ROOT
    user_agent: str | None = None
    default_target_dir: str = DEFAULT_TARGET_DIR
    default_package_manager: str = DEFAULT_PACKAGE_MANAGER

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None, *, cwd: Path | None = None) -> ScaffoldSettings:
        env = os.environ if environ is None else environ
        return cls(cwd=cwd or Path.cwd(), user_agent=env.get(USER_AGENT_ENV))


__all__ = ["BUNDLED_TEMPLATES_ROOT", "DEFAULT_TARGET_DIR", "USER_AGENT_ENV", "ScaffoldOptions", "ScaffoldSettings"]
