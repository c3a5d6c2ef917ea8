"""Reporting protocol for scaffold runs.

The orchestrator emits user-facing messages through ``ScaffoldReporter``;
the CLI renders them with Rich, tests collect them in memory.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScaffoldReporter(ABC):
    """Observer interface for messages produced during a scaffold run."""

    @abstractmethod
    def step(self, message: str) -> None:
        """A materialization step is starting."""
        ...  # pragma: no cover

    @abstractmethod
    def outro(self, message: str) -> None:
        """The run finished; *message* holds the next steps."""
        ...  # pragma: no cover

    @abstractmethod
    def cancel(self, message: str) -> None:
        """The run was cancelled by the user."""
        ...  # pragma: no cover
