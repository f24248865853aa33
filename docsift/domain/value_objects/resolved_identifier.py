"""Resolved account identifier value object."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class IdentifierSource(str, Enum):
    """Where a page's account identifier came from, highest priority first."""
    METADATA = "metadata"
    TEXT_PATTERN = "text_pattern"
    CONTINUATION = "continuation"
    SYNTHETIC = "synthetic"


@dataclass(frozen=True)
class ResolvedIdentifier:
    """Key used to route a page's transactions to an account."""

    value: str
    source: IdentifierSource

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("resolved identifier must be a non-empty string")
        if not isinstance(self.source, IdentifierSource):
            object.__setattr__(self, "source", IdentifierSource(self.source))

    def __str__(self) -> str:
        return self.value
