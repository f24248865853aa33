"""Decide which account a page belongs to."""
from __future__ import annotations

import logging
import re
import time
from typing import Callable, Optional, Pattern, Sequence

from docsift.constants import (
    ACCOUNT_NUMBER_PATTERNS,
    SYNTHETIC_ACCOUNT_PREFIX,
    SYNTHETIC_BANK_PLACEHOLDER,
)
from docsift.domain.entities.account import AccountMetadata
from docsift.domain.value_objects.resolved_identifier import IdentifierSource, ResolvedIdentifier

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


def _compile(patterns: Sequence[str]) -> tuple[Pattern[str], ...]:
    return tuple(re.compile(pattern, re.IGNORECASE) for pattern in patterns)


class AccountIdentityResolver:
    """Resolve a page's account identifier.

    Priority: the extracted account number, then an account-number-shaped
    token in the raw OCR text, then the identifier of the previous page,
    and finally a synthetic identifier built from the bank name and the
    injected clock. The resolver holds no per-run state; the caller passes
    the previous identifier in.
    """

    def __init__(
        self,
        *,
        clock: Optional[Clock] = None,
        patterns: Sequence[str] = ACCOUNT_NUMBER_PATTERNS,
    ) -> None:
        self._clock = clock or time.time
        self._patterns = _compile(patterns)

    def resolve(
        self,
        metadata: AccountMetadata,
        page_text: str,
        previous: Optional[str] = None,
    ) -> ResolvedIdentifier:
        if metadata.account_number:
            return ResolvedIdentifier(metadata.account_number, IdentifierSource.METADATA)

        from_text = self.find_account_number(page_text)
        if from_text:
            return ResolvedIdentifier(from_text, IdentifierSource.TEXT_PATTERN)

        if previous:
            return ResolvedIdentifier(previous, IdentifierSource.CONTINUATION)

        synthetic = self.synthesize(metadata.bank_name)
        logger.warning("Could not extract account number, using temporary: %s", synthetic)
        return ResolvedIdentifier(synthetic, IdentifierSource.SYNTHETIC)

    def find_account_number(self, text: str) -> Optional[str]:
        """First account number matched by the prioritised patterns."""

        if not text:
            return None
        for pattern in self._patterns:
            match = pattern.search(text)
            if match and match.group(1):
                return match.group(1)
        return None

    def synthesize(self, bank_name: str) -> str:
        millis = int(round(self._clock() * 1000))
        bank = bank_name.strip() or SYNTHETIC_BANK_PLACEHOLDER
        return f"{SYNTHETIC_ACCOUNT_PREFIX}-{bank}-{millis}"
