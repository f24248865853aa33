"""
PageState value object

Lifecycle of a single page inside a pipeline run. Pages only move forward;
an empty OCR result jumps straight to SKIPPED.
"""
from __future__ import annotations

from enum import Enum


class PageState(str, Enum):
    """Valid page states."""
    SEGMENTED = "segmented"
    OCR_DONE = "ocr_done"
    METADATA_EXTRACTED = "metadata_extracted"
    TRANSACTIONS_EXTRACTED = "transactions_extracted"
    RESOLVED = "resolved"
    AGGREGATED = "aggregated"
    SKIPPED = "skipped"

    @property
    def is_terminal(self) -> bool:
        return self in (PageState.AGGREGATED, PageState.SKIPPED)


_ORDER = {
    PageState.SEGMENTED: 0,
    PageState.OCR_DONE: 1,
    # Both extraction stages share a rank: they may complete in either order.
    PageState.METADATA_EXTRACTED: 2,
    PageState.TRANSACTIONS_EXTRACTED: 2,
    PageState.RESOLVED: 3,
    PageState.AGGREGATED: 4,
}


def can_transition(current: PageState, target: PageState) -> bool:
    """Return True when moving from ``current`` to ``target`` never goes backwards."""
    if current.is_terminal:
        return False
    if target is PageState.SKIPPED:
        return current is PageState.OCR_DONE
    if current is target:
        return False
    return _ORDER[target] >= _ORDER[current]
