"""Interfaces the core expects from the host editor."""
from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from prompt_edit.core.edit.regions import TrackedRegion


class LiveDisplaySink(Protocol):
    """Incremental output surface for streamed content deltas."""

    def prepare(self) -> None:
        """Clear the surface and make it visible."""
        ...

    def append(self, text: str) -> None:
        ...


class EditorHost(Protocol):
    """Editor operations used by the commands and the edit reconciler."""

    def get_selected_range(self) -> Optional[tuple[str, "TrackedRegion"]]:
        """Selected text plus a tracked region over it, or None."""
        ...

    def get_current_language_tag(self) -> str:
        ...

    def replace_tracked_region(self, region: "TrackedRegion", new_text: str) -> None:
        ...

    def show_panel(self, text: str) -> None:
        ...

    def append_to_panel(self, text: str) -> None:
        ...

    def confirm(self, prompt: str) -> bool:
        ...

    def show_message(self, text: str) -> None:
        """Short status message."""
        ...


class PanelSink:
    """Adapts an EditorHost's panel into a LiveDisplaySink."""

    def __init__(self, host: EditorHost) -> None:
        self._host = host

    def prepare(self) -> None:
        self._host.show_panel("")

    def append(self, text: str) -> None:
        self._host.append_to_panel(text)
