"""Editor command implementations"""
from prompt_edit.core.features.base_feature import BaseFeature
from prompt_edit.core.features.ask_feature import AskFeature
from prompt_edit.core.features.explain_feature import ExplainFeature
from prompt_edit.core.features.refactor_feature import RefactorFeature
from prompt_edit.core.features.fix_feature import FixFeature
from prompt_edit.core.features.apply_feature import ApplyFeature
from prompt_edit.core.features.cancel_feature import CancelFeature

__all__ = [
    "BaseFeature",
    "AskFeature",
    "ExplainFeature",
    "RefactorFeature",
    "FixFeature",
    "ApplyFeature",
    "CancelFeature",
]


def default_features() -> list[BaseFeature]:
    """Commands in menu order."""
    return [
        AskFeature(),
        ExplainFeature(),
        RefactorFeature(),
        FixFeature(),
        ApplyFeature(),
        CancelFeature(),
    ]
