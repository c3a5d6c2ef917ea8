"""Scaffold orchestration.

:class:`ScaffoldOrchestrator` walks a run through its steps in a fixed order:
target directory, conflict policy, package name, template, then either
delegation to an external generator or local materialization followed by the
next-steps message. Every question goes through the injected
:class:`~create_q_base_web.prompts.Prompter`; cancelling any of them ends the
run without touching the filesystem further.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from pathlib import Path

from create_q_base_web import catalog, directory, materializer
from create_q_base_web.config import ScaffoldOptions, ScaffoldSettings
from create_q_base_web.exceptions import ScaffoldCancelled, ScaffoldError
from create_q_base_web.models.catalog import TemplateVariant
from create_q_base_web.models.enums import DirectoryState, OverwriteChoice
from create_q_base_web.models.scaffold import PackageManagerInfo, ScaffoldRequest
from create_q_base_web.naming import (
    format_target_dir,
    is_valid_package_name,
    package_name_for,
    to_valid_package_name,
)
from create_q_base_web.package_manager import (
    build_delegate_argv,
    command_hint,
    next_step_commands,
    package_manager_name,
    resolve_package_manager,
    rewrite_command,
)
from create_q_base_web.prompts import PromptChoice, Prompter
from create_q_base_web.reporting import ScaffoldReporter

logger = logging.getLogger(__name__)

CANCEL_MESSAGE = "Operation cancelled"

_OVERWRITE_CHOICES = (
    PromptChoice(label="Cancel operation", value=OverwriteChoice.CANCEL),
    PromptChoice(label="Remove existing files and continue", value=OverwriteChoice.CLEAR),
    PromptChoice(label="Ignore files and continue", value=OverwriteChoice.IGNORE),
)


class ScaffoldOrchestrator:
    """Drive one scaffold run from raw options to a project on disk."""

    def __init__(self, settings: ScaffoldSettings, prompter: Prompter, reporter: ScaffoldReporter) -> None:
        self._settings = settings
        self._prompter = prompter
        self._reporter = reporter

    def run(self, options: ScaffoldOptions) -> int:
        """Run the scaffold and return the process exit code."""
        try:
            return self._run(options)
        except ScaffoldCancelled:
            self._reporter.cancel(CANCEL_MESSAGE)
            return 0

    def _run(self, options: ScaffoldOptions) -> int:
        pkg_info = resolve_package_manager(self._settings.user_agent)

        target_dir = options.target_dir or self._ask_target_dir()
        root = self._settings.cwd / target_dir
        overwrite = self._resolve_conflict(target_dir, root, force=options.overwrite)
        package_name = self._resolve_package_name(target_dir)
        template = self._resolve_template(options.template, pkg_info)

        request = ScaffoldRequest(
            target_dir=target_dir,
            root=root,
            package_name=package_name,
            template=template,
            overwrite=overwrite,
            package_manager=pkg_info,
        )
        logger.debug("resolved request: %s", request)

        variant = catalog.find_variant(request.template)
        if variant is None:
            raise ScaffoldError(f"unknown template: {request.template}")

        request.root.mkdir(parents=True, exist_ok=True)
        if variant.is_delegate:
            return self._delegate(variant, request)

        self._materialize(request)
        return 0

    # ------------------------------------------------------------------
    # Resolution steps
    # ------------------------------------------------------------------

    def _ask_target_dir(self) -> str:
        default = self._settings.default_target_dir

        def _validate(value: str) -> bool | str:
            if not value or format_target_dir(value):
                return True
            return "Invalid project name"

        answer = self._prompter.text("Project name:", default=default, validate=_validate)
        return format_target_dir(answer) or default

    def _resolve_conflict(self, target_dir: str, root: Path, *, force: bool) -> OverwriteChoice | None:
        if directory.classify(root) is not DirectoryState.NON_EMPTY:
            return None

        if force:
            choice = OverwriteChoice.CLEAR
        else:
            where = "Current directory" if target_dir == "." else f'Target directory "{target_dir}"'
            choice = OverwriteChoice(
                self._prompter.select(f"{where} is not empty. Please choose how to proceed:", _OVERWRITE_CHOICES)
            )

        if choice is OverwriteChoice.CANCEL:
            raise ScaffoldCancelled("target directory not empty")
        if choice is OverwriteChoice.CLEAR:
            directory.clear(root)
        return choice

    def _resolve_package_name(self, target_dir: str) -> str:
        package_name = package_name_for(target_dir, self._settings.cwd)
        if is_valid_package_name(package_name):
            return package_name

        suggestion = to_valid_package_name(package_name)

        def _validate(value: str) -> bool | str:
            return True if is_valid_package_name(value) else "Invalid package.json name"

        return self._prompter.text("Package name:", default=suggestion, validate=_validate)

    def _resolve_template(self, requested: str | None, pkg_info: PackageManagerInfo | None) -> str:
        if requested and requested in catalog.list_template_ids():
            return requested

        message = (
            f'"{requested}" isn\'t a valid template. Please choose from below:' if requested else "Select a framework:"
        )
        framework_id = self._prompter.select(
            message,
            [
                PromptChoice(label=framework.display_name, value=framework.id, color=framework.color)
                for framework in catalog.FRAMEWORKS
            ],
        )
        framework = catalog.find_framework(framework_id)
        if framework is None:
            raise ScaffoldError(f"unknown framework: {framework_id}")

        return self._prompter.select(
            "Select a variant:",
            [_variant_choice(variant, pkg_info) for variant in framework.variants],
        )

    # ------------------------------------------------------------------
    # Terminal steps
    # ------------------------------------------------------------------

    def _delegate(self, variant: TemplateVariant, request: ScaffoldRequest) -> int:
        command = rewrite_command(variant.delegate_command, request.package_manager)
        argv = build_delegate_argv(command, request.target_dir)
        argv[0] = shutil.which(argv[0]) or argv[0]
        logger.debug("delegating to %s", argv)
        result = subprocess.run(argv, cwd=self._settings.cwd, check=False)
        # A negative return code means the child died from a signal and has no exit status.
        return result.returncode if result.returncode >= 0 else 0

    def _materialize(self, request: ScaffoldRequest) -> None:
        self._reporter.step(f"Scaffolding project in {request.root}...")
        source = materializer.template_dir(self._settings.templates_root, request.template)
        materializer.materialize(source, request.root, request.package_name)
        self._reporter.outro(self._done_message(request))

    def _done_message(self, request: ScaffoldRequest) -> str:
        lines = ["Done. Now run:", ""]
        cwd = self._settings.cwd
        if request.root.resolve() != cwd.resolve():
            relative = os.path.relpath(request.root, cwd)
            lines.append(f"  cd {quote_path(relative)}")
        manager = package_manager_name(request.package_manager, self._settings.default_package_manager)
        lines.extend(f"  {command}" for command in next_step_commands(manager))
        return "\n".join(lines)


def quote_path(path: str) -> str:
    """Wrap *path* in double quotes when it contains a space."""
    return f'"{path}"' if " " in path else path


def _variant_choice(variant: TemplateVariant, pkg_info: PackageManagerInfo | None) -> PromptChoice:
    hint = command_hint(variant.delegate_command, pkg_info) if variant.is_delegate else None
    return PromptChoice(label=variant.display_name, value=variant.id, color=variant.color, hint=hint)


__all__ = ["CANCEL_MESSAGE", "ScaffoldOrchestrator", "quote_path"]
