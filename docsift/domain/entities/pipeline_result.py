"""Pipeline output handed to the presentation layer."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from docsift.domain.entities.account import Account
from docsift.domain.value_objects.page_state import PageState
from docsift.domain.value_objects.resolved_identifier import IdentifierSource


@dataclass(frozen=True)
class PageOutcome:
    """How a single page was handled during the run."""

    page_number: int
    state: PageState
    account_number: Optional[str] = None
    identifier_source: Optional[IdentifierSource] = None
    transaction_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "pageNumber": self.page_number,
            "state": self.state.value,
            "accountNumber": self.account_number,
            "identifierSource": self.identifier_source.value if self.identifier_source else None,
            "transactionCount": self.transaction_count,
        }


@dataclass(frozen=True)
class PipelineResult:
    """Original file name plus accounts in first-seen order."""

    file_name: str
    accounts: Tuple[Account, ...] = field(default_factory=tuple)
    pages: Tuple[PageOutcome, ...] = field(default_factory=tuple)

    @property
    def skipped_pages(self) -> Tuple[int, ...]:
        return tuple(page.page_number for page in self.pages if page.state is PageState.SKIPPED)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": True,
            "fileName": self.file_name,
            "accounts": [account.to_dict() for account in self.accounts],
            "pages": [page.to_dict() for page in self.pages],
        }
