"""Structured-extraction infrastructure adapters."""

from .json_recovery import recover_json_object
from .ollama_client import OllamaExtractionClient, extract_reply_text
from .prompt_builder import StatementPromptBuilder

__all__ = [
    "OllamaExtractionClient",
    "StatementPromptBuilder",
    "extract_reply_text",
    "recover_json_object",
]
