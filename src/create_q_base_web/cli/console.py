"""Rich-based rendering of scaffold messages."""

from __future__ import annotations

from typing import ClassVar

from rich.console import Console
from rich.markup import escape

from create_q_base_web.reporting import ScaffoldReporter


class RichScaffoldReporter(ScaffoldReporter):
    """Print scaffold progress and results to the terminal.

    Steps and the final message go to stdout; cancellation goes to stderr so
    it stays visible when stdout is redirected.
    """

    _STYLES: ClassVar[dict[str, str]] = {
        "step": "[cyan]◇[/]",
        "outro": "[green]└[/]",
        "cancel": "[red]■[/]",
    }

    def __init__(self, console: Console | None = None, err_console: Console | None = None) -> None:
        self._console = console or Console()
        self._err_console = err_console or Console(stderr=True)

    def step(self, message: str) -> None:
        self._console.print(f"{self._STYLES['step']} {escape(message)}")

    def outro(self, message: str) -> None:
        self._console.print(f"{self._STYLES['outro']} {escape(message)}")

    def cancel(self, message: str) -> None:
        self._err_console.print(f"{self._STYLES['cancel']} [red]{escape(message)}[/]")


__all__ = ["RichScaffoldReporter"]
