"""Ask a free-form question"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class AskFeature(BaseFeature):
    """Ask a question, with the selection as context when there is one"""

    prompt_label = "Ask:"

    @property
    def name(self) -> str:
        return "ask"

    @property
    def title(self) -> str:
        return "Ask..."

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+A"

    def execute(self, app, prompt: str = "") -> str:
        if not prompt.strip():
            return "Nothing to ask"
        return app.ask(prompt)
