"""Pytest configuration for docsift tests.

Ensures the project root is on sys.path so ``docsift.*`` imports resolve
during test collection, and gives every test a minimal service
configuration with fresh cached settings.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add repository root to sys.path for module resolution.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from docsift.api.v1 import dependencies  # noqa: E402
from docsift.config import get_settings  # noqa: E402


@pytest.fixture(autouse=True)
def service_env(monkeypatch):
    monkeypatch.setenv("OCR_API_KEY", "test-ocr-key")
    monkeypatch.setenv("LLM_URL", "http://llm.test/api/generate")
    monkeypatch.delenv("EXTRACTION_BACKEND", raising=False)
    get_settings.cache_clear()
    dependencies._parse_statement_handler.cache_clear()
    yield
    get_settings.cache_clear()
    dependencies._parse_statement_handler.cache_clear()


def make_pdf(page_texts):
    """Build an in-memory PDF with one page per text entry."""
    import fitz  # type: ignore

    with fitz.open() as document:
        for text in page_texts:
            page = document.new_page()
            page.insert_text((72, 72), text)
        return document.tobytes()


@pytest.fixture
def pdf_factory():
    return make_pdf
