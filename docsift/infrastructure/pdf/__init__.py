"""PDF infrastructure utilities."""

from .page_segmenter import PdfPageSegmenter

__all__ = ["PdfPageSegmenter"]
