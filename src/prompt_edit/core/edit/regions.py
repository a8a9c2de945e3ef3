"""Document ranges whose bounds follow edits made after capture."""

from __future__ import annotations

from typing import Optional

import shiboken6
from PySide6.QtGui import QTextCursor, QTextDocument


class TrackedRegion:
    """A (start, end) pair of QTextCursors on one document.

    Qt moves the cursors as the document changes, so the region still
    covers "the same" text after an asynchronous round trip. Call
    ``release()`` once the region has been consumed.
    """

    def __init__(self, document: QTextDocument, start: int, end: int) -> None:
        if start > end:
            start, end = end, start
        self._document: Optional[QTextDocument] = document
        self._start: Optional[QTextCursor] = QTextCursor(document)
        self._start.setPosition(start)
        self._end: Optional[QTextCursor] = QTextCursor(document)
        self._end.setPosition(end)
        # Text typed right after the region stays outside it.
        self._end.setKeepPositionOnInsert(True)

    @classmethod
    def from_cursor(cls, cursor: QTextCursor) -> "TrackedRegion":
        return cls(cursor.document(), cursor.selectionStart(), cursor.selectionEnd())

    @property
    def document(self) -> Optional[QTextDocument]:
        return self._document

    @property
    def released(self) -> bool:
        return self._start is None

    def is_alive(self) -> bool:
        """True while the region is tracked and its document still exists."""
        return (
            not self.released
            and self._document is not None
            and shiboken6.isValid(self._document)
        )

    @property
    def start(self) -> int:
        self._check()
        return self._start.position()

    @property
    def end(self) -> int:
        self._check()
        return self._end.position()

    def text(self) -> str:
        cursor = self._selection()
        # Qt reports paragraph breaks as U+2029.
        return cursor.selectedText().replace("\u2029", "\n")

    def replace(self, new_text: str) -> None:
        """Replace the region's current contents as one undoable edit."""
        cursor = self._selection()
        start = cursor.selectionStart()
        cursor.beginEditBlock()
        cursor.insertText(new_text)
        cursor.endEditBlock()
        # Both bounds collapse onto the insertion point; re-span the new text.
        self._start.setPosition(start)
        self._end.setPosition(cursor.position())

    def release(self) -> None:
        self._start = None
        self._end = None
        self._document = None

    def _selection(self) -> QTextCursor:
        self._check()
        cursor = QTextCursor(self._document)
        cursor.setPosition(self._start.position())
        cursor.setPosition(self._end.position(), QTextCursor.MoveMode.KeepAnchor)
        return cursor

    def _check(self) -> None:
        if not self.is_alive():
            raise RuntimeError("Tracked region is released or its document is gone")

    def __repr__(self) -> str:
        if not self.is_alive():
            return "<TrackedRegion released>"
        return f"<TrackedRegion {self.start}..{self.end}>"
