"""
Account Entity - aggregate unit of statement output.

Accounts are keyed by a resolved identifier. Metadata is captured once when
the account is created; later pages only append transaction rows.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class AccountMetadata:
    """Identity fields extracted from one page; empty string means unknown."""

    bank_name: str = ""
    account_holder_name: str = ""
    account_number: str = ""
    account_type: str = ""
    currency: str = ""
    statement_start_date: str = ""
    statement_end_date: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "AccountMetadata":
        """Build metadata from the extractor's camelCase JSON object."""
        data = payload if isinstance(payload, Mapping) else {}
        return cls(
            bank_name=_as_text(data.get("bankName")),
            account_holder_name=_as_text(data.get("accountHolderName")),
            # Ledger keys never carry surrounding whitespace.
            account_number=_as_text(data.get("accountNumber")).strip(),
            account_type=_as_text(data.get("accountType")),
            currency=_as_text(data.get("currency")),
            statement_start_date=_as_text(data.get("statementStartDate")),
            statement_end_date=_as_text(data.get("statementEndDate")),
        )

    def to_dict(self) -> Dict[str, str]:
        return {
            "bankName": self.bank_name,
            "accountHolderName": self.account_holder_name,
            "accountNumber": self.account_number,
            "accountType": self.account_type,
            "currency": self.currency,
            "statementStartDate": self.statement_start_date,
            "statementEndDate": self.statement_end_date,
        }


@dataclass(frozen=True)
class TransactionRow:
    """One transaction line exactly as extracted; amounts stay strings."""

    date: str = ""
    description: str = ""
    debit_amount: str = ""
    credit_amount: str = ""
    running_balance: str = ""

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "TransactionRow":
        return cls(
            date=_as_text(payload.get("date")),
            description=_as_text(payload.get("description")),
            debit_amount=_as_text(payload.get("debitAmount")),
            credit_amount=_as_text(payload.get("creditAmount")),
            running_balance=_as_text(payload.get("runningBalance")),
        )

    @classmethod
    def list_from_payload(cls, payload: Mapping[str, Any] | None) -> Tuple["TransactionRow", ...]:
        """Rows from a ``{"transactions": [...]}`` object, in the order given."""
        if not isinstance(payload, Mapping):
            return ()
        rows = payload.get("transactions")
        if not isinstance(rows, list):
            return ()
        return tuple(cls.from_payload(row) for row in rows if isinstance(row, Mapping))

    def to_dict(self) -> Dict[str, str]:
        return {
            "date": self.date,
            "description": self.description,
            "debitAmount": self.debit_amount,
            "creditAmount": self.credit_amount,
            "runningBalance": self.running_balance,
        }


@dataclass(frozen=True)
class Account:
    """
    Account aggregate.

    Immutable; use :meth:`with_transactions` to obtain a copy with more rows.
    """

    account_number: str
    metadata: AccountMetadata
    transactions: Tuple[TransactionRow, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.account_number:
            raise ValueError("account_number must be a non-empty string")
        if not isinstance(self.transactions, tuple):
            object.__setattr__(self, "transactions", tuple(self.transactions))

    @classmethod
    def open(cls, account_number: str, metadata: AccountMetadata) -> "Account":
        """Create an account seeded with the metadata of its first page."""
        return cls(account_number=account_number, metadata=metadata)

    def with_transactions(self, rows: Iterable[TransactionRow]) -> "Account":
        """Return a copy with ``rows`` appended after the existing ones."""
        return Account(
            account_number=self.account_number,
            metadata=self.metadata,
            transactions=self.transactions + tuple(rows),
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = self.metadata.to_dict()
        # The resolved key wins over whatever the first page extracted.
        data["accountNumber"] = self.account_number
        data["transactions"] = [row.to_dict() for row in self.transactions]
        return data
