"""Domain models for create-q-base-web."""

from create_q_base_web.models.catalog import Framework, TemplateVariant
from create_q_base_web.models.enums import DirectoryState, OverwriteChoice
from create_q_base_web.models.scaffold import PackageManagerInfo, ScaffoldRequest

__all__ = [
    "DirectoryState",
    "Framework",
    "OverwriteChoice",
    "PackageManagerInfo",
    "ScaffoldRequest",
    "TemplateVariant",
]
