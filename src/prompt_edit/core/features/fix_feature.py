"""Fix bugs in the selected code (confirm, then apply)"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class FixFeature(BaseFeature):
    """Ask for a fix and offer to apply it straight away"""

    @property
    def name(self) -> str:
        return "fix"

    @property
    def title(self) -> str:
        return "Fix Selection"

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+F"

    def execute(self, app, prompt: str = "") -> str:
        return app.fix()
