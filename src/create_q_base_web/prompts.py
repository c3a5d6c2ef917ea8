"""Prompt capability used by the orchestrator.

The orchestrator only depends on :class:`Prompter`; :class:`QuestionaryPrompter`
is the interactive implementation. A prompt that is aborted (Ctrl-C or
``questionary`` returning ``None``) raises :class:`ScaffoldCancelled`.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from create_q_base_web.exceptions import ScaffoldCancelled

Validator = Callable[[str], bool | str]
"""Returns ``True`` for valid input, or an error message to display."""


@dataclass(frozen=True)
class PromptChoice:
    """One option in a select prompt.

    ``color`` is an opaque display hint carried over from the catalog.
    """

    label: str
    value: str
    color: str = "default"
    hint: str | None = None


class Prompter(Protocol):
    def text(self, message: str, *, default: str = "", validate: Validator | None = None) -> str: ...

    def select(self, message: str, choices: Sequence[PromptChoice]) -> str: ...


def _title(choice: PromptChoice) -> list[tuple[str, str]]:
    style = f"fg:{choice.color}" if choice.color != "default" else ""
    title = [(style, choice.label)]
    if choice.hint:
        title.append(("fg:ansibrightblack", f"  {choice.hint}"))
    return title


class QuestionaryPrompter:
    """Interactive prompts backed by ``questionary``."""

    def text(self, message: str, *, default: str = "", validate: Validator | None = None) -> str:
        import questionary

        kwargs: dict[str, Any] = {"default": default}
        if validate is not None:
            kwargs["validate"] = validate
        return self._ask(questionary.text(message, **kwargs))

    def select(self, message: str, choices: Sequence[PromptChoice]) -> str:
        import questionary

        question = questionary.select(
            message,
            choices=[questionary.Choice(title=_title(choice), value=choice.value) for choice in choices],
        )
        return self._ask(question)

    @staticmethod
    def _ask(question: Any) -> str:
        try:
            answer = question.unsafe_ask()
        except KeyboardInterrupt as exc:
            raise ScaffoldCancelled("prompt aborted") from exc
        if answer is None:
            raise ScaffoldCancelled("prompt aborted")
        return answer


__all__ = ["PromptChoice", "Prompter", "QuestionaryPrompter", "Validator"]
