"""Request-scoped models assembled during a scaffold run."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from create_q_base_web.models.enums import OverwriteChoice


class PackageManagerInfo(BaseModel):
    """Package manager that invoked the scaffolder, parsed from its user agent."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = ""

    @property
    def is_yarn1(self) -> bool:
        return self.name == "yarn" and self.version.startswith("1.")


class ScaffoldRequest(BaseModel):
    """Everything the materializer needs, once every question is answered.

    Attributes:
        target_dir: Target directory as typed by the user (already formatted).
        root: Absolute path of the project root.
        package_name: Name written into ``package.json``; always a valid npm name.
        template: Catalog id of the selected variant.
        overwrite: Decision taken for a non-empty target, ``None`` when there was no conflict.
        package_manager: Detected package manager, ``None`` when undetectable.
    """

    model_config = ConfigDict(frozen=True)

    target_dir: str
    root: Path
    package_name: str
    template: str
    overwrite: OverwriteChoice | None = None
    package_manager: PackageManagerInfo | None = None
