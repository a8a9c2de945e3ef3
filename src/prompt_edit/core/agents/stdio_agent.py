"""Configured external tool launched in stdio transport mode."""
from __future__ import annotations

from typing import Iterable, Optional

from prompt_edit.core.agents.base_agent import BaseAgent


class StdioAgent(BaseAgent):
    """Agent wrapper for a CLI run as ``<exe> --stdio --provider P --model M``."""

    def __init__(
        self,
        executable: str,
        provider: str,
        model: str,
        extra_args: Optional[Iterable[str]] = None,
        extra_env: Optional[Iterable[str]] = None,
    ) -> None:
        self._executable = executable
        self.provider = provider
        self.model = model
        self.extra_args = list(extra_args or [])
        if extra_env:
            self.forwarded_env = self.forwarded_env + tuple(
                name for name in extra_env if name not in self.forwarded_env
            )

    @property
    def name(self) -> str:
        """Agent name."""
        return f"{self.provider}/{self.model}"

    @property
    def executable(self) -> str:
        return self._executable

    def arguments(self) -> list[str]:
        return [
            "--stdio",
            "--provider",
            self.provider,
            "--model",
            self.model,
            *self.extra_args,
        ]
