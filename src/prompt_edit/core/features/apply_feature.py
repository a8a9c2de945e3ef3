"""Apply the pending refactor"""
from typing import Optional
from prompt_edit.core.features.base_feature import BaseFeature


class ApplyFeature(BaseFeature):
    """Write the pending code over the region it was requested for"""

    @property
    def name(self) -> str:
        return "apply"

    @property
    def title(self) -> str:
        return "Apply Pending Code"

    @property
    def hotkey(self) -> Optional[str]:
        return "Ctrl+Alt+Y"

    def execute(self, app, prompt: str = "") -> str:
        return app.apply_pending()
