"""Template catalog models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TemplateVariant(BaseModel):
    """One selectable flavour of a framework template.

    ``color`` is a display hint for the prompt layer only.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    color: str = "default"
    delegate_command: str | None = None

    @property
    def is_delegate(self) -> bool:
        return self.delegate_command is not None


class Framework(BaseModel):
    """A framework and the variants it owns, in display order."""

    model_config = ConfigDict(frozen=True)

    id: str
    display_name: str
    color: str = "default"
    variants: tuple[TemplateVariant, ...]
