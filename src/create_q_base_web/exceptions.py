"""Exception hierarchy for create-q-base-web.

All errors raised by the scaffolder inherit from :class:`ScaffoldError`, so the
CLI can map any library failure to an exit code with a single ``except``
clause while still telling cancellation apart from real failures.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors."""


class ScaffoldCancelled(ScaffoldError):
    """Raised when the user cancels at a prompt."""


class TemplateError(ScaffoldError):
    """Raised when a bundled template is missing or malformed.

    Attributes:
        template: Id of the offending template, when known.
    """

    def __init__(self, message: str, *, template: str | None = None) -> None:
        super().__init__(message)
        self.template = template
