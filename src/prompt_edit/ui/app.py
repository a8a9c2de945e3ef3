"""Main GUI application coordinator"""
import logging
import os
import signal
import sys
from typing import Optional

from PySide6.QtCore import QTimer
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QApplication, QInputDialog

from prompt_edit.core.app import App
from prompt_edit.core.config import Config
from prompt_edit.core.features import BaseFeature
from prompt_edit.ui.windows.editor_window import EditorWindow

logger = logging.getLogger(__name__)


class PromptEditApp:
    """Main application coordinator"""

    def __init__(self, file_path: Optional[str] = None, config: Optional[Config] = None):
        self.app = QApplication.instance() or QApplication(sys.argv)
        self.window = EditorWindow()
        if file_path:
            self.window.load_file(file_path)

        # Core app talks to the window through the EditorHost protocol
        self.core_app = App(self.window, config=config)
        self.window.apply_requested.connect(lambda: self.trigger("apply"))

        self.actions: dict[str, QAction] = {}
        self.setup_menu()

    def setup_menu(self):
        """Create the Assistant menu, one action per command"""
        menu = self.window.menuBar().addMenu("&Assistant")
        for feature in self.core_app.features.values():
            action = QAction(feature.title, self.window)
            hotkey = self.core_app.config.keybinding(feature.name, feature.hotkey)
            if hotkey:
                action.setShortcut(QKeySequence(hotkey))
            action.triggered.connect(lambda _=False, f=feature: self.handle_feature(f))
            menu.addAction(action)
            self.actions[feature.name] = action

    def handle_feature(self, feature: BaseFeature):
        """Ask for input when the command needs it, then run it"""
        prompt = ""
        if feature.prompt_label:
            prompt, ok = QInputDialog.getText(self.window, feature.title, feature.prompt_label)
            if not ok:
                return
        status = feature.execute(self.core_app, prompt)
        logger.debug("%s: %s", feature.name, status)
        self.window.show_message(status)

    def trigger(self, name: str):
        """Run a command by name (panel key presses land here)"""
        self.handle_feature(self.core_app.features[name])

    def run(self):
        """Start application loop"""
        print("\nPromptEdit is running!")
        print(f"   Tool: {self.core_app.agent.executable} ({self.core_app.agent.name})")
        print("   Press Ctrl+C to exit\n")

        self.window.show()
        return self.app.exec()


def main():
    """Main entry point for GUI application"""
    logging.basicConfig(
        level=os.environ.get("PROMPT_EDIT_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Set up signal handler for Ctrl+C
    def signal_handler(sig, frame):
        print("\nShutting down PromptEdit...")
        QApplication.quit()
        sys.exit(0)

    signal.signal(signal.SIGINT, signal_handler)

    file_path = sys.argv[1] if len(sys.argv) > 1 else None
    app = PromptEditApp(file_path)

    # Allow Ctrl+C to work by processing events periodically
    timer = QTimer()
    timer.timeout.connect(lambda: None)  # Wake up event loop
    timer.start(100)

    sys.exit(app.run())
