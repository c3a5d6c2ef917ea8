"""Copy a bundled template into the target directory.

Materialization runs in two phases: every top-level template entry except
``package.json`` is copied (with reserved names renamed), then
``package.json`` is parsed, given the resolved package name and written out.
The package name therefore never appears in any other generated file.
"""

from __future__ import annotations

import json
import logging
import shutil
from collections.abc import Mapping
from pathlib import Path

from create_q_base_web.exceptions import TemplateError

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"

# Dotfiles can't ship inside the template package, so they are stored under
# reserved names and renamed on the way out.
RENAME_FILES: Mapping[str, str] = {
    "_gitignore": ".gitignore",
    "_env": ".env",
}


def template_dir(templates_root: Path, template: str) -> Path:
    """Directory holding the files of *template* (``template-<id>``)."""
    path = templates_root / f"template-{template}"
    if not path.is_dir():
        raise TemplateError(f"template directory not found: {path}", template=template)
    return path


def _template_id(template_root: Path) -> str:
    return template_root.name.removeprefix("template-")


def copy_entry(src: Path, dest: Path) -> None:
    """Copy *src* to *dest*, recursing into directories and overwriting files."""
    if src.is_dir():
        dest.mkdir(parents=True, exist_ok=True)
        for child in src.iterdir():
            copy_entry(child, dest / child.name)
    else:
        shutil.copy(src, dest)


def write(
    template_root: Path,
    target_root: Path,
    filename: str,
    rename_map: Mapping[str, str] = RENAME_FILES,
    content: str | None = None,
) -> Path:
    """Write one top-level entry into *target_root*.

    *content*, when given, is written verbatim; otherwise the entry is copied
    from *template_root*. Returns the destination path.
    """
    target_path = target_root / rename_map.get(filename, filename)
    if content is not None:
        target_path.write_text(content, encoding="utf-8", newline="")
    else:
        copy_entry(template_root / filename, target_path)
    logger.debug("wrote %s", target_path)
    return target_path


def render_package_json(template_root: Path, package_name: str) -> str:
    """Return the template's ``package.json`` with ``name`` set to *package_name*."""
    source = template_root / PACKAGE_JSON
    template = _template_id(template_root)
    if not source.is_file():
        raise TemplateError(f"{PACKAGE_JSON} not found in {template_root}", template=template)
    try:
        pkg = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise TemplateError(f"invalid {PACKAGE_JSON} in {template_root}: {exc}", template=template) from exc
    if not isinstance(pkg, dict):
        raise TemplateError(f"{source} must contain a JSON object", template=template)
    pkg["name"] = package_name
    return json.dumps(pkg, indent=2, ensure_ascii=False) + "\n"


def materialize(
    template_root: Path,
    target_root: Path,
    package_name: str,
    rename_map: Mapping[str, str] = RENAME_FILES,
) -> list[Path]:
    """Copy *template_root* into *target_root* and write the patched ``package.json``.

    Returns the top-level paths written, ``package.json`` last.
    """
    package_json = render_package_json(template_root, package_name)
    target_root.mkdir(parents=True, exist_ok=True)

    written: list[Path] = []
    for name in sorted(entry.name for entry in template_root.iterdir()):
        if name == PACKAGE_JSON:
            continue
        written.append(write(template_root, target_root, name, rename_map))
    written.append(write(template_root, target_root, PACKAGE_JSON, rename_map, package_json))
    return written


__all__ = ["PACKAGE_JSON", "RENAME_FILES", "copy_entry", "materialize", "render_package_json", "template_dir", "write"]
