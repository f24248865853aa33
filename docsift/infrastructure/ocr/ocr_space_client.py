"""OCR.space adapter: one single-page PDF in, recognised text out."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from docsift.config import get_settings
from docsift.domain.entities.page import Page, PageText
from docsift.domain.exceptions import OCRProcessingError, OCRTransportError

logger = logging.getLogger(__name__)

UNKNOWN_OCR_ERROR = "Unknown OCR error"


class OcrSpaceClient:
    """Send page payloads to the OCR.space ``parse/image`` endpoint.

    The client does not retry. Processing failures reported by the service
    raise :class:`OCRProcessingError`; network failures, timeouts and
    unreadable responses raise :class:`OCRTransportError`.
    """

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        api_key: Optional[str] = None,
        endpoint: Optional[str] = None,
        language: Optional[str] = None,
        engine: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self._session = session or requests.Session()
        self._api_key = api_key if api_key is not None else settings.ocr_api_key
        self._endpoint = endpoint or settings.ocr_endpoint
        self._language = language or settings.ocr_language
        self._engine = engine or settings.ocr_engine
        self._timeout = timeout or settings.ocr_timeout_seconds

        if not self._api_key:
            raise RuntimeError("OCR_API_KEY must be configured before using the OCR client")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def extract_text(self, page: Page) -> PageText:
        data = self._post(page)

        if data.get("IsErroredOnProcessing"):
            raise OCRProcessingError(page.page_number, _error_message(data.get("ErrorMessage")))

        results = data.get("ParsedResults") or []
        parts = [
            str(result.get("ParsedText") or "")
            for result in results
            if isinstance(result, dict)
        ]
        text = "\n".join(parts).strip()
        logger.debug("OCR returned %s characters", len(text), extra={"page": page.page_number})
        return PageText(page_number=page.page_number, text=text)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _post(self, page: Page) -> Dict[str, Any]:
        files = {"file": (page.filename, page.payload, "application/pdf")}
        form = {
            "language": self._language,
            "isOverlayRequired": "false",
            "OCREngine": self._engine,
        }
        headers = {"apikey": self._api_key or ""}

        try:
            response = self._session.post(
                self._endpoint,
                files=files,
                data=form,
                headers=headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
        except requests.Timeout as exc:
            raise OCRTransportError(
                f"OCR request timed out on page {page.page_number}", page_number=page.page_number, stage="ocr"
            ) from exc
        except requests.RequestException as exc:
            raise OCRTransportError(
                f"OCR request failed on page {page.page_number}: {exc}", page_number=page.page_number, stage="ocr"
            ) from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise OCRTransportError(
                f"OCR service returned a non-JSON response on page {page.page_number}",
                page_number=page.page_number,
                stage="ocr",
            ) from exc
        if not isinstance(data, dict):
            raise OCRTransportError(
                f"OCR service returned an unexpected payload on page {page.page_number}",
                page_number=page.page_number,
                stage="ocr",
            )
        return data


def _error_message(value: Any) -> str:
    if isinstance(value, list):
        message = "; ".join(str(item) for item in value if item)
    else:
        message = str(value or "")
    return message or UNKNOWN_OCR_ERROR
