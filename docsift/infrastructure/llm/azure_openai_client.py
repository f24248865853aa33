"""Azure OpenAI adapter for structured extraction."""
from __future__ import annotations

import logging
from typing import Any, Optional

from azure.identity import DefaultAzureCredential, get_bearer_token_provider
from openai import APIConnectionError, APITimeoutError, AzureOpenAI, OpenAIError

from docsift.config import get_settings
from docsift.domain.exceptions import (
    ExtractionCallError,
    ExtractionServiceUnavailableError,
    UnknownReplyFormatError,
)
from docsift.infrastructure.llm.connection import is_connection_refused

logger = logging.getLogger(__name__)


class AzureOpenAIExtractionClient:
    """Send extraction prompts to an Azure OpenAI chat deployment."""

    def __init__(self, *, client: Optional[AzureOpenAI] = None) -> None:
        settings = get_settings()
        endpoint = settings.ensure_endpoint()
        model = settings.azure_openai_deployment_name

        if client is not None:
            self._client = client
        else:
            if not endpoint:
                raise RuntimeError("AZURE_OPENAI_ENDPOINT must be configured before using the extraction client")
            api_key = settings.azure_openai_api_key
            if api_key:
                self._client = AzureOpenAI(
                    api_key=api_key,
                    api_version=settings.azure_openai_api_version,
                    azure_endpoint=endpoint,
                    timeout=settings.llm_timeout_seconds,
                    max_retries=0,
                )
            else:
                token_provider = get_bearer_token_provider(
                    DefaultAzureCredential(),
                    "https://cognitiveservices.azure.com/.default",
                )
                self._client = AzureOpenAI(
                    api_version=settings.azure_openai_api_version,
                    azure_endpoint=endpoint,
                    azure_ad_token_provider=token_provider,
                    timeout=settings.llm_timeout_seconds,
                    max_retries=0,
                )

        if not model:
            raise RuntimeError("AZURE_OPENAI_DEPLOYMENT_NAME must be configured")
        self._model = model

    def complete(self, prompt: str, *, label: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=self._model,
                messages=[{"role": "user", "content": prompt}],
                temperature=0,
                response_format={"type": "json_object"},
            )
        except APITimeoutError as exc:
            raise ExtractionCallError(label, "request timed out") from exc
        except APIConnectionError as exc:
            if not is_connection_refused(exc):
                raise ExtractionCallError(label, str(exc)) from exc
            raise ExtractionServiceUnavailableError(
                f"Azure OpenAI endpoint unreachable: {exc}. Check AZURE_OPENAI_ENDPOINT"
            ) from exc
        except OpenAIError as exc:
            raise ExtractionCallError(label, str(exc)) from exc

        return _coerce_content(response, label)


def _coerce_content(response: Any, label: str) -> str:
    choices = getattr(response, "choices", None)
    if not choices:
        raise UnknownReplyFormatError(f"{label}: Unknown LLM response format")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if isinstance(content, list):
        # Some SDK versions return content parts instead of a plain string.
        content = "".join(getattr(part, "text", "") or "" for part in content)
    if not content:
        raise UnknownReplyFormatError(f"{label}: Unknown LLM response format")
    return str(content)
