"""Main editor window: document editor, response dock and status bar.

Implements the EditorHost protocol the core uses.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from PySide6.QtCore import Qt, Signal, Slot
from PySide6.QtGui import QTextDocument
from PySide6.QtWidgets import (
    QDockWidget,
    QMainWindow,
    QMessageBox,
    QPlainTextDocumentLayout,
    QPlainTextEdit,
)

from prompt_edit.core.edit import TrackedRegion
from prompt_edit.ui.widgets.response_panel import ResponsePanel

STATUS_TIMEOUT_MS = 8000

LANGUAGE_BY_SUFFIX = {
    ".py": "python",
    ".pyi": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
    ".rs": "rust",
    ".go": "go",
    ".c": "c",
    ".h": "c",
    ".cpp": "cpp",
    ".hpp": "cpp",
    ".java": "java",
    ".rb": "ruby",
    ".sh": "bash",
    ".el": "elisp",
    ".md": "markdown",
    ".json": "json",
    ".toml": "toml",
    ".yaml": "yaml",
    ".yml": "yaml",
}


class EditorWindow(QMainWindow):
    """Single-document editor hosting the assistant panel."""

    apply_requested = Signal()

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.file_path: Optional[Path] = None
        self.setWindowTitle("PromptEdit")
        self.resize(1100, 700)

        self.editor = QPlainTextEdit()
        self.editor.setObjectName("documentEditor")
        self.editor.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)
        self.setCentralWidget(self.editor)

        self.panel = ResponsePanel()
        self.panel.apply_requested.connect(self.apply_requested)
        self.panel.dismissed.connect(self._hide_panel)
        self.panel_dock = QDockWidget("Assistant", self)
        self.panel_dock.setObjectName("assistantDock")
        self.panel_dock.setWidget(self.panel)
        self.addDockWidget(Qt.DockWidgetArea.RightDockWidgetArea, self.panel_dock)
        self.panel_dock.hide()

        self.statusBar()

    # -- Documents ------------------------------------------------------------

    def load_file(self, path) -> None:
        path = Path(path)
        self.set_document_text(path.read_text(encoding="utf-8"))
        self.file_path = path
        self.setWindowTitle(f"PromptEdit - {path.name}")

    def set_document_text(self, text: str) -> None:
        """Swap in a fresh document; regions on the old one become dead."""
        document = QTextDocument(self)
        document.setDocumentLayout(QPlainTextDocumentLayout(document))
        document.setPlainText(text)
        old = self.editor.document()
        self.editor.setDocument(document)
        if old is not None and old.parent() is self:
            old.deleteLater()
        self.file_path = None

    def document_text(self) -> str:
        return self.editor.toPlainText()

    # -- EditorHost -----------------------------------------------------------

    def get_selected_range(self) -> Optional[tuple[str, TrackedRegion]]:
        cursor = self.editor.textCursor()
        if not cursor.hasSelection():
            return None
        region = TrackedRegion.from_cursor(cursor)
        return region.text(), region

    def get_current_language_tag(self) -> str:
        if self.file_path is None:
            return "text"
        return LANGUAGE_BY_SUFFIX.get(self.file_path.suffix.lower(), "text")

    def replace_tracked_region(self, region: TrackedRegion, new_text: str) -> None:
        region.replace(new_text)

    def show_panel(self, text: str) -> None:
        self.panel.set_text(text)
        self.panel_dock.show()
        self.panel_dock.raise_()

    def append_to_panel(self, text: str) -> None:
        self.panel.append_text(text)

    def confirm(self, prompt: str) -> bool:
        answer = QMessageBox.question(
            self,
            "PromptEdit",
            prompt,
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No,
            QMessageBox.StandardButton.Yes,
        )
        return answer == QMessageBox.StandardButton.Yes

    def show_message(self, text: str) -> None:
        self.statusBar().showMessage(text, STATUS_TIMEOUT_MS)

    @Slot()
    def _hide_panel(self) -> None:
        self.panel_dock.hide()
        self.editor.setFocus()
