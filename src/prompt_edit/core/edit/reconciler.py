"""Applies code from a successful response back into the originating document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QTextDocument

from prompt_edit.core.edit.code_extract import extract_code
from prompt_edit.core.edit.regions import TrackedRegion
from prompt_edit.core.editor_host import EditorHost
from prompt_edit.core.errors import ApplyPreconditionError

logger = logging.getLogger(__name__)

APPLY_HINT = "Press 'a' in this panel (or Ctrl+Alt+Y) to apply the code."
CONFIRM_PROMPT = "Apply the suggested fix to the selection?"


@dataclass(frozen=True)
class PendingEdit:
    code: str
    document: Optional[QTextDocument]
    region: TrackedRegion


class PendingApplySlot:
    """Holds at most one proposed edit; the newest proposal wins."""

    def __init__(self) -> None:
        self._pending: Optional[PendingEdit] = None

    @property
    def pending(self) -> Optional[PendingEdit]:
        return self._pending

    def store(self, edit: PendingEdit) -> None:
        previous, self._pending = self._pending, edit
        if previous is not None and previous.region is not edit.region:
            previous.region.release()

    def clear(self) -> None:
        self._pending = None


pending_apply_slot = PendingApplySlot()


class EditReconciler:
    """Review-then-apply and confirm-then-apply flows over tracked regions."""

    def __init__(self, host: EditorHost, slot: Optional[PendingApplySlot] = None) -> None:
        self._host = host
        self.slot = slot if slot is not None else pending_apply_slot

    def review_then_apply(self, response_text: str, region: TrackedRegion) -> str:
        """Stash the extracted code and show the response for review."""
        code = extract_code(response_text)
        self.slot.store(PendingEdit(code=code, document=region.document, region=region))
        self._host.show_panel(f"{APPLY_HINT}\n\n{response_text}")
        return code

    def apply_pending(self) -> None:
        """Replace the pending region with its code. Raises ApplyPreconditionError."""
        edit = self.slot.pending
        if edit is None:
            raise ApplyPreconditionError("No pending code to apply")
        if not edit.region.is_alive():
            self.slot.clear()
            edit.region.release()
            raise ApplyPreconditionError("The original document no longer exists")
        self._host.replace_tracked_region(edit.region, edit.code)
        edit.region.release()
        self.slot.clear()
        logger.info("Applied %d characters of pending code", len(edit.code))

    def confirm_then_apply(self, response_text: str, region: TrackedRegion) -> bool:
        """Ask before replacing; on "no" show the full response instead."""
        code = extract_code(response_text)
        try:
            if not region.is_alive():
                raise ApplyPreconditionError("The original document no longer exists")
            if self._host.confirm(CONFIRM_PROMPT):
                self._host.replace_tracked_region(region, code)
                return True
            self._host.show_panel(response_text)
            return False
        finally:
            region.release()
