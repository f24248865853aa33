"""Domain services package."""

from .account_resolver import AccountIdentityResolver
from .transaction_aggregator import LedgerState, TransactionAggregator
from .transaction_window import extract_transaction_block

__all__ = [
    "AccountIdentityResolver",
    "LedgerState",
    "TransactionAggregator",
    "extract_transaction_block",
]
