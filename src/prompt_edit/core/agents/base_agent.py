"""Abstract base class for external stdio tools"""
from __future__ import annotations

import os
import shutil
import sys
from abc import ABC, abstractmethod
from typing import Mapping, Optional

PROVIDER_KEY_VARS = (
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "GEMINI_API_KEY",
    "GOOGLE_API_KEY",
    "OPENROUTER_API_KEY",
    "DEEPSEEK_API_KEY",
    "MISTRAL_API_KEY",
    "GROQ_API_KEY",
)
MODEL_SELECTOR_VAR = "PROMPT_EDIT_MODEL"


class BaseAgent(ABC):
    """Describes how to launch one external tool speaking the stdio protocol."""

    #: Environment variables copied from the host; everything else is withheld.
    forwarded_env: tuple[str, ...] = PROVIDER_KEY_VARS + (MODEL_SELECTOR_VAR,)

    @property
    @abstractmethod
    def name(self) -> str:
        """Agent name"""
        pass

    @property
    @abstractmethod
    def executable(self) -> str:
        """Executable name or path as configured"""
        pass

    @abstractmethod
    def arguments(self) -> list[str]:
        """Command-line arguments selecting stdio mode and the model"""
        pass

    def resolve_program(self) -> Optional[str]:
        """Absolute path of the executable, or None when it is not on PATH."""
        if sys.platform == "win32":
            found = shutil.which(f"{self.executable}.cmd")
            if found:
                return found
        return shutil.which(self.executable)

    def environment(self, source: Optional[Mapping[str, str]] = None) -> dict[str, str]:
        """Allow-listed subset of ``source`` (the host environment by default)."""
        if source is None:
            source = os.environ
        return {key: source[key] for key in self.forwarded_env if key in source}
