"""Abstract base class for editor commands"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from prompt_edit.core.app import App


class BaseFeature(ABC):
    """Abstract base class for all editor commands"""

    #: When set, the UI asks for free text with this label before executing.
    prompt_label: Optional[str] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier, also the key for keybinding overrides"""
        pass

    @property
    @abstractmethod
    def title(self) -> str:
        """Menu text"""
        pass

    @property
    @abstractmethod
    def hotkey(self) -> Optional[str]:
        """Default keybinding (e.g., 'Ctrl+Alt+R')"""
        pass

    @abstractmethod
    def execute(self, app: "App", prompt: str = "") -> str:
        """
        Execute the command

        Args:
            app: Core application coordinator
            prompt: Text entered by the user, when prompt_label is set

        Returns:
            str: Status message
        """
        pass
