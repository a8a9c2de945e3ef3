"""Explain the selected code"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class ExplainFeature(BaseFeature):
    """Explain the selection in the response panel"""

    @property
    def name(self) -> str:
        return "explain"

    @property
    def title(self) -> str:
        return "Explain Selection"

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+E"

    def execute(self, app, prompt: str = "") -> str:
        return app.explain()
