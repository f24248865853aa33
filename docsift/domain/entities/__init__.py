"""Domain entities package"""

from .account import Account, AccountMetadata, TransactionRow
from .page import Page, PageText
from .pipeline_result import PageOutcome, PipelineResult

__all__ = [
    "Account",
    "AccountMetadata",
    "TransactionRow",
    "Page",
    "PageText",
    "PageOutcome",
    "PipelineResult",
]
