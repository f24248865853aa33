"""OCR infrastructure adapters."""

from .ocr_space_client import OcrSpaceClient

__all__ = ["OcrSpaceClient"]
