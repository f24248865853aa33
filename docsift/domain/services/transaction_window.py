"""Narrow page text down to the transaction table before prompting."""
from __future__ import annotations

from typing import Iterable

from docsift.constants import TRANSACTION_SECTION_HEADERS


def extract_transaction_block(text: str, headers: Iterable[str] = TRANSACTION_SECTION_HEADERS) -> str:
    """Return ``text`` from the first matching section header onwards.

    Headers are tried in order and matched case-insensitively; the first
    header that occurs anywhere wins, even if a later header occurs earlier
    in the text. Without a match the full text is returned unchanged so
    tables without a recognisable heading are still attempted.
    """

    lowered = text.lower()
    for header in headers:
        index = lowered.find(header.lower())
        if index != -1:
            return text[index:]
    return text
