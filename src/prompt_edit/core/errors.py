"""Exceptions raised by PromptEdit."""
from __future__ import annotations


class PromptEditError(Exception):
    """Base class for PromptEdit errors"""


class ExecutableNotFoundError(PromptEditError, FileNotFoundError):
    """The configured external tool is not on PATH."""

    def __init__(self, executable: str) -> None:
        self.executable = executable
        super().__init__(
            f"{executable} not found. Install it and ensure `{executable}` is on PATH."
        )


class ApplyPreconditionError(PromptEditError):
    """An apply was requested but there is nothing valid to apply."""
