"""Edit reconciliation: code extraction, tracked regions, pending apply."""

from prompt_edit.core.edit.code_extract import extract_code
from prompt_edit.core.edit.reconciler import (
    APPLY_HINT,
    EditReconciler,
    PendingApplySlot,
    PendingEdit,
    pending_apply_slot,
)
from prompt_edit.core.edit.regions import TrackedRegion

__all__ = [
    "APPLY_HINT",
    "EditReconciler",
    "PendingApplySlot",
    "PendingEdit",
    "TrackedRegion",
    "extract_code",
    "pending_apply_slot",
]
