"""Ollama-style ``/api/generate`` adapter for structured extraction."""
from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from docsift.config import get_settings
from docsift.domain.exceptions import (
    ExtractionCallError,
    ExtractionServiceUnavailableError,
    UnknownReplyFormatError,
)
from docsift.infrastructure.llm.connection import is_connection_refused

logger = logging.getLogger(__name__)


def extract_reply_text(data: Any, label: str = "LLM") -> str:
    """Return reply text from a ``response`` or ``choices[0].text`` payload."""

    if isinstance(data, dict):
        response = data.get("response")
        if response:
            return str(response)
        choices = data.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            text = choices[0].get("text")
            if text:
                return str(text)
    raise UnknownReplyFormatError(f"{label}: Unknown LLM response format")


class OllamaExtractionClient:
    """Send a prompt to a local language-model server and return its raw reply."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        settings = get_settings()
        self._session = session or requests.Session()
        self._url = url or settings.llm_url
        self._model = model or settings.llm_model
        self._timeout = timeout or settings.llm_timeout_seconds

        if not self._url:
            raise RuntimeError("LLM_URL must be configured before using the extraction client")

    def complete(self, prompt: str, *, label: str) -> str:
        payload = {"model": self._model, "prompt": prompt, "stream": False}
        try:
            response = self._session.post(self._url, json=payload, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.Timeout as exc:
            raise ExtractionCallError(label, f"timed out after {self._timeout:g}s") from exc
        except requests.ConnectionError as exc:
            if is_connection_refused(exc):
                raise ExtractionServiceUnavailableError(
                    f"LLM server not running at {self._url}. Start Ollama with: ollama serve"
                ) from exc
            raise ExtractionCallError(label, str(exc)) from exc
        except requests.RequestException as exc:
            raise ExtractionCallError(label, str(exc)) from exc
        except ValueError as exc:
            raise ExtractionCallError(label, "response body is not JSON") from exc

        text = extract_reply_text(data, label)
        logger.debug("%s reply: %s characters", label, len(text))
        return text
