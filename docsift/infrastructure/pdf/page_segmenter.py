"""Split PDF documents into single-page PDFs for isolated OCR."""
from __future__ import annotations

import logging
from typing import List

import fitz  # type: ignore

from docsift.constants import PDF_SIGNATURE
from docsift.domain.entities.page import Page
from docsift.domain.exceptions import DocumentLoadError

logger = logging.getLogger(__name__)


class PdfPageSegmenter:
    """Cuts a PDF byte payload into one PDF payload per page."""

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get_page_count(self, payload: bytes) -> int:
        """Return the number of pages in the PDF payload."""

        with self._open(payload) as document:
            return document.page_count

    def split(self, payload: bytes) -> List[Page]:
        """Return pages ``1..N`` in document order.

        Pages are copied with ``insert_pdf`` so their content streams are
        not re-rendered. Any failure aborts the whole split.
        """

        pages: List[Page] = []
        with self._open(payload) as document:
            try:
                for index in range(document.page_count):
                    with fitz.open() as single:
                        single.insert_pdf(document, from_page=index, to_page=index)
                        pages.append(Page(page_number=index + 1, payload=single.tobytes()))
            except (RuntimeError, ValueError) as exc:
                raise DocumentLoadError(f"Failed to split PDF page {len(pages) + 1}: {exc}") from exc

        logger.debug("Split document into %s pages", len(pages))
        return pages

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _open(payload: bytes) -> "fitz.Document":
        if not payload:
            raise DocumentLoadError("Document payload is empty")
        if PDF_SIGNATURE not in bytes(payload[:1024]):
            raise DocumentLoadError("Document payload is not a PDF")
        try:
            document = fitz.open(stream=bytes(payload), filetype="pdf")
        except (RuntimeError, ValueError) as exc:
            raise DocumentLoadError(f"Unable to load PDF document: {exc}") from exc
        if document.needs_pass:
            document.close()
            raise DocumentLoadError("PDF document is encrypted")
        if document.page_count < 1:
            document.close()
            raise DocumentLoadError("PDF document has no pages")
        return document
