"""Page entities produced by segmentation and OCR."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A single-page PDF payload cut from the source document."""

    page_number: int
    payload: bytes

    def __post_init__(self) -> None:
        if self.page_number < 1:
            raise ValueError("page_number must be >= 1")
        if not isinstance(self.payload, (bytes, bytearray)):
            raise TypeError("payload must be bytes")

    @property
    def filename(self) -> str:
        return f"page-{self.page_number}.pdf"

    def __repr__(self) -> str:
        return f"Page(page_number={self.page_number}, size={len(self.payload)})"


@dataclass(frozen=True)
class PageText:
    """Raw OCR text for a page; empty text means the page is skipped."""

    page_number: int
    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text.strip()
