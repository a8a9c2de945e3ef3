"""Refactor the selected code (review, then apply)"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class RefactorFeature(BaseFeature):
    """Rewrite the selection; the result waits in the panel until applied"""

    prompt_label = "Refactor instruction:"

    @property
    def name(self) -> str:
        return "refactor"

    @property
    def title(self) -> str:
        return "Refactor Selection..."

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+R"

    def execute(self, app, prompt: str = "") -> str:
        return app.refactor(prompt)
