"""Fold per-page results into per-account ledgers."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Optional, Tuple

from docsift.domain.entities.account import Account, AccountMetadata, TransactionRow
from docsift.domain.value_objects.resolved_identifier import ResolvedIdentifier


@dataclass(frozen=True)
class LedgerState:
    """Running state of a pipeline run.

    ``accounts`` keeps insertion order, which is the order accounts were
    first seen in the document. ``previous_identifier`` is the key the last
    processed page resolved to.
    """

    accounts: Mapping[str, Account] = field(default_factory=dict)
    previous_identifier: Optional[str] = None

    def get(self, account_number: str) -> Optional[Account]:
        return self.accounts.get(account_number)

    def ordered_accounts(self) -> Tuple[Account, ...]:
        return tuple(self.accounts.values())


class TransactionAggregator:
    """Apply one page's resolution and rows to a :class:`LedgerState`."""

    def apply(
        self,
        state: LedgerState,
        identifier: ResolvedIdentifier,
        metadata: AccountMetadata,
        transactions: Iterable[TransactionRow],
    ) -> LedgerState:
        """Return the next state; ``state`` itself is left untouched.

        A new identifier opens an account seeded with ``metadata``. A known
        identifier keeps its stored metadata and only gains rows.
        """

        key = identifier.value
        accounts: Dict[str, Account] = dict(state.accounts)
        account = state.get(key) or Account.open(key, metadata)
        accounts[key] = account.with_transactions(transactions)
        return LedgerState(accounts=accounts, previous_identifier=key)
