"""Domain exceptions.

Every failure the statement pipeline can raise derives from
:class:`DocSiftError`. Errors carry the page and extraction stage that
produced them so the first failure of a run can be reported with context.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCode(str, Enum):
    """Stable error codes exposed at the service boundary."""

    INVALID_PDF = "INVALID_PDF"
    INVALID_FILE_TYPE = "INVALID_FILE_TYPE"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    OCR_UNREADABLE = "OCR_UNREADABLE"
    OCR_TIMEOUT = "OCR_TIMEOUT"
    LLM_UNAVAILABLE = "LLM_UNAVAILABLE"
    LLM_SCHEMA_VIOLATION = "LLM_SCHEMA_VIOLATION"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DocSiftError(Exception):
    """Base exception for statement pipeline errors."""

    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        page_number: Optional[int] = None,
        stage: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.page_number = page_number
        self.stage = stage

    def with_context(self, *, page_number: Optional[int] = None, stage: Optional[str] = None) -> "DocSiftError":
        """Fill in page/stage context that is not already set and return self."""
        if self.page_number is None and page_number is not None:
            self.page_number = page_number
        if self.stage is None and stage is not None:
            self.stage = stage
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "errorCode": self.error_code.value,
            "message": self.message,
            "pageNumber": self.page_number,
            "stage": self.stage,
        }


class ConfigurationError(DocSiftError):
    """Raised at start-up when required service settings are absent."""

    error_code = ErrorCode.CONFIGURATION_ERROR


class InvalidUploadError(DocSiftError):
    """Raised when an uploaded file cannot be accepted for processing."""

    error_code = ErrorCode.INVALID_FILE_TYPE
    status_code = 400

    def __init__(self, message: str, *, too_large: bool = False):
        super().__init__(message)
        if too_large:
            self.error_code = ErrorCode.FILE_TOO_LARGE
            self.status_code = 413


class DocumentLoadError(DocSiftError):
    """Raised when the payload is not a parseable PDF document."""

    error_code = ErrorCode.INVALID_PDF
    status_code = 422


class OCRProcessingError(DocSiftError):
    """Raised when the OCR service reports a processing failure for a page."""

    error_code = ErrorCode.OCR_UNREADABLE
    status_code = 422

    def __init__(self, page_number: int, service_message: str):
        super().__init__(f"OCR failed on page {page_number}: {service_message}", page_number=page_number, stage="ocr")
        self.service_message = service_message


class OCRTransportError(DocSiftError):
    """Raised when the OCR service cannot be reached or times out."""

    error_code = ErrorCode.OCR_TIMEOUT
    status_code = 504


class ExtractionServiceUnavailableError(DocSiftError):
    """Raised when the language-model service refuses connections."""

    error_code = ErrorCode.LLM_UNAVAILABLE
    status_code = 503


class ExtractionCallError(DocSiftError):
    """Raised when a language-model call fails for any other reason."""

    error_code = ErrorCode.LLM_UNAVAILABLE
    status_code = 502

    def __init__(self, label: str, reason: str, **context: Any):
        super().__init__(f"{label} LLM call failed: {reason}", **context)
        self.label = label


class UnknownReplyFormatError(DocSiftError):
    """Raised when the language-model reply carries no recognised text field."""

    error_code = ErrorCode.LLM_SCHEMA_VIOLATION
    status_code = 502


class EmptyOrMalformedReplyError(DocSiftError):
    """Raised when a reply contains no JSON object delimiters."""

    error_code = ErrorCode.LLM_SCHEMA_VIOLATION
    status_code = 502


class JSONRepairFailedError(DocSiftError):
    """Raised when a reply still fails to parse after textual repair."""

    error_code = ErrorCode.LLM_SCHEMA_VIOLATION
    status_code = 502

    def __init__(self, label: str, parse_error: str, excerpt: str, **context: Any):
        super().__init__(f"{label}: invalid JSON - {parse_error}", **context)
        self.label = label
        self.parse_error = parse_error
        self.excerpt = excerpt
