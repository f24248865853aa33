from __future__ import annotations

import pytest

from docsift.config import Settings, get_settings
from docsift.domain.exceptions import ConfigurationError


def test_defaults_follow_service_conventions() -> None:
  settings = get_settings()

  assert settings.ocr_endpoint == "https://api.ocr.space/parse/image"
  assert settings.ocr_engine == "2"
  assert settings.ocr_timeout_seconds == 60
  assert settings.llm_model == "llama3"
  assert settings.llm_timeout_seconds == 120
  assert settings.extraction_backend == "ollama"
  assert settings.max_upload_bytes == 50 * 1024 * 1024


def test_configured_environment_has_nothing_missing() -> None:
  settings = get_settings()

  assert settings.missing_service_configuration() == []
  settings.require_service_configuration()


def test_missing_ocr_key_and_llm_url_are_reported(monkeypatch) -> None:
  monkeypatch.delenv("OCR_API_KEY")
  monkeypatch.setenv("LLM_URL", "   ")
  get_settings.cache_clear()

  with pytest.raises(ConfigurationError) as exc_info:
    get_settings().require_service_configuration()

  assert str(exc_info.value) == "OCR_API_KEY, LLM_URL missing"
  assert exc_info.value.error_code.value == "CONFIGURATION_ERROR"


def test_azure_backend_requires_endpoint_and_deployment(monkeypatch) -> None:
  monkeypatch.setenv("EXTRACTION_BACKEND", "azure-openai")
  monkeypatch.delenv("LLM_URL")
  monkeypatch.delenv("AZURE_OPENAI_ENDPOINT", raising=False)
  monkeypatch.delenv("AZURE_OPENAI_DEPLOYMENT_NAME", raising=False)
  get_settings.cache_clear()

  assert get_settings().missing_service_configuration() == [
    "AZURE_OPENAI_ENDPOINT",
    "AZURE_OPENAI_DEPLOYMENT_NAME",
  ]


@pytest.mark.parametrize(
  "raw, expected",
  [
    ("https://example.openai.azure.com", "https://example.openai.azure.com/"),
    ("https://example.openai.azure.com///", "https://example.openai.azure.com/"),
    ("  ", ""),
  ],
)
def test_ensure_endpoint_normalises_trailing_slash(raw, expected) -> None:
  assert Settings(AZURE_OPENAI_ENDPOINT=raw).ensure_endpoint() == expected
