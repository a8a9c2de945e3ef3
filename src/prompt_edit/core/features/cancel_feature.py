"""Cancel the in-flight request"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class CancelFeature(BaseFeature):
    """Kill the running tool process"""

    @property
    def name(self) -> str:
        return "cancel"

    @property
    def title(self) -> str:
        return "Cancel Request"

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+K"

    def execute(self, app, prompt: str = "") -> str:
        return app.cancel()
