"""Public API surface for create-q-base-web."""

__version__ = "0.1.0"

from create_q_base_web.catalog import FRAMEWORKS, find_framework, find_variant, list_template_ids
from create_q_base_web.config import ScaffoldOptions, ScaffoldSettings
from create_q_base_web.directory import classify, clear
from create_q_base_web.exceptions import ScaffoldCancelled, ScaffoldError, TemplateError
from create_q_base_web.materializer import RENAME_FILES, copy_entry, materialize, render_package_json, write
from create_q_base_web.models import (
    DirectoryState,
    Framework,
    OverwriteChoice,
    PackageManagerInfo,
    ScaffoldRequest,
    TemplateVariant,
)
from create_q_base_web.naming import format_target_dir, is_valid_package_name, to_valid_package_name
from create_q_base_web.orchestrator import ScaffoldOrchestrator
from create_q_base_web.package_manager import (
    build_delegate_argv,
    next_step_commands,
    resolve_package_manager,
    rewrite_command,
)

__all__ = [
    "FRAMEWORKS",
    "RENAME_FILES",
    "DirectoryState",
    "Framework",
    "OverwriteChoice",
    "PackageManagerInfo",
    "ScaffoldCancelled",
    "ScaffoldError",
    "ScaffoldOptions",
    "ScaffoldOrchestrator",
    "ScaffoldRequest",
    "ScaffoldSettings",
    "TemplateError",
    "TemplateVariant",
    "__version__",
    "build_delegate_argv",
    "classify",
    "clear",
    "copy_entry",
    "find_framework",
    "find_variant",
    "format_target_dir",
    "is_valid_package_name",
    "list_template_ids",
    "materialize",
    "next_step_commands",
    "render_package_json",
    "resolve_package_manager",
    "rewrite_command",
    "to_valid_package_name",
    "write",
]
