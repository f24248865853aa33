"""Shared FastAPI dependencies for v1 API routers.

These factories centralize construction of the pipeline and its external
service adapters so routers depend on simple callables and tests can swap
them through ``app.dependency_overrides``.
"""
from __future__ import annotations

from functools import lru_cache

from docsift.application.commands.parse_statement import ExtractionClient, ParseStatementHandler
from docsift.config import Settings, get_settings
from docsift.infrastructure.llm.ollama_client import OllamaExtractionClient
from docsift.infrastructure.ocr.ocr_space_client import OcrSpaceClient
from docsift.infrastructure.pdf.page_segmenter import PdfPageSegmenter


def build_extraction_client(settings: Settings) -> ExtractionClient:
    """Pick the structured-extraction backend named in settings."""
    if settings.extraction_backend == "azure-openai":
        # Imported lazily so the Azure SDKs are only loaded when selected.
        from docsift.infrastructure.llm.azure_openai_client import AzureOpenAIExtractionClient

        return AzureOpenAIExtractionClient()
    return OllamaExtractionClient()


@lru_cache()
def _parse_statement_handler() -> ParseStatementHandler:
    settings = get_settings()
    return ParseStatementHandler(
        PdfPageSegmenter(),
        OcrSpaceClient(),
        build_extraction_client(settings),
    )


def get_parse_statement_handler() -> ParseStatementHandler:
    """Provide a cached ParseStatement handler."""
    return _parse_statement_handler()


def get_app_settings() -> Settings:
    return get_settings()
