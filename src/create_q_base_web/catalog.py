"""Static catalog of bundled templates.

The catalog is a closed, compiled-in table: frameworks own their variants and
variant ids double as template directory suffixes (``template-<id>``).
"""

from __future__ import annotations

from create_q_base_web.models.catalog import Framework, TemplateVariant

FRAMEWORKS: tuple[Framework, ...] = (
    Framework(
        id="vue",
        display_name="Vue",
        color="green",
        variants=(
            TemplateVariant(id="vue", display_name="JavaScript", color="green"),
            TemplateVariant(
                id="create-vue",
                display_name="Official Vue starter ↗",
                color="green",
                delegate_command="npm create vue@latest TARGET_DIR",
            ),
        ),
    ),
    Framework(
        id="react",
        display_name="React",
        color="red",
        variants=(TemplateVariant(id="react-ts", display_name="TypeScript (dev)", color="red"),),
    ),
)


def list_template_ids() -> list[str]:
    """All variant ids across all frameworks, in declaration order."""
    return [variant.id for framework in FRAMEWORKS for variant in framework.variants]


def find_variant(template_id: str) -> TemplateVariant | None:
    for framework in FRAMEWORKS:
        for variant in framework.variants:
            if variant.id == template_id:
                return variant
    return None


def find_framework(framework_id: str) -> Framework | None:
    for framework in FRAMEWORKS:
        if framework.id == framework_id:
            return framework
    return None


__all__ = ["FRAMEWORKS", "find_framework", "find_variant", "list_template_ids"]
