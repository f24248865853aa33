from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

from docsift.domain.exceptions import ConfigurationError

# Ensure environment variables from the repository root .env are available
# regardless of the working directory used to start the process.
ROOT_DIR = Path(__file__).resolve().parents[1]
load_dotenv(ROOT_DIR / ".env")


class Settings(BaseSettings):
  ocr_api_key: str | None = Field(default=None, alias="OCR_API_KEY")
  ocr_endpoint: str = Field(default="https://api.ocr.space/parse/image", alias="OCR_ENDPOINT")
  ocr_language: str = Field(default="eng", alias="OCR_LANGUAGE")
  ocr_engine: str = Field(default="2", alias="OCR_ENGINE")
  ocr_timeout_seconds: float = Field(default=60.0, alias="OCR_TIMEOUT_SECONDS")

  extraction_backend: Literal["ollama", "azure-openai"] = Field(default="ollama", alias="EXTRACTION_BACKEND")
  llm_url: str | None = Field(default=None, alias="LLM_URL")
  llm_model: str = Field(default="llama3", alias="LLM_MODEL")
  llm_timeout_seconds: float = Field(default=120.0, alias="LLM_TIMEOUT_SECONDS")

  azure_openai_api_key: str | None = Field(default=None, alias="AZURE_OPENAI_API_KEY")
  azure_openai_endpoint: str = Field(default="", alias="AZURE_OPENAI_ENDPOINT")
  azure_openai_api_version: str = Field(default="2024-12-01-preview", alias="AZURE_OPENAI_API_VERSION")
  azure_openai_deployment_name: str | None = Field(default=None, alias="AZURE_OPENAI_DEPLOYMENT_NAME")

  max_upload_mb: int = Field(default=50, alias="MAX_UPLOAD_MB")

  def ensure_endpoint(self) -> str:
    endpoint = (self.azure_openai_endpoint or "").strip()
    if not endpoint:
      return ""
    return endpoint.rstrip("/") + "/"

  @property
  def max_upload_bytes(self) -> int:
    return self.max_upload_mb * 1024 * 1024

  def missing_service_configuration(self) -> List[str]:
    """Names of required environment values that are not set."""

    missing: List[str] = []
    if not (self.ocr_api_key or "").strip():
      missing.append("OCR_API_KEY")
    if self.extraction_backend == "ollama":
      if not (self.llm_url or "").strip():
        missing.append("LLM_URL")
    else:
      if not self.ensure_endpoint():
        missing.append("AZURE_OPENAI_ENDPOINT")
      if not self.azure_openai_deployment_name:
        missing.append("AZURE_OPENAI_DEPLOYMENT_NAME")
    return missing

  def require_service_configuration(self) -> None:
    missing = self.missing_service_configuration()
    if missing:
      raise ConfigurationError(f"{', '.join(missing)} missing")

  class Config:
    case_sensitive = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  return Settings()  # type: ignore[arg-type]
