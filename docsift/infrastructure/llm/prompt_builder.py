"""Construct extraction prompts for bank statement pages."""
from __future__ import annotations

import json
from typing import List, Sequence

from docsift.constants import METADATA_FIELDS, TRANSACTION_FIELDS


def _empty_object(fields: Sequence[str]) -> dict:
    return {name: "" for name in fields}


class StatementPromptBuilder:
    """Assemble the metadata and transaction prompts for one page."""

    def metadata_prompt(self, text: str) -> str:
        lines: List[str] = [
            "You are a strict JSON extractor for bank statements.",
            "",
            "RULES:",
            *self._output_rules(),
            "- Do NOT guess values",
            "- Empty string if missing",
            "- Look for account number patterns like:",
            '  - "Account No", "A/c No", "Account Number"',
            "  - Numbers with format: XXXXXXXXXXXX (10-18 digits)",
            '  - Numbers after "Savings A/c", "Current A/c"',
            "",
            "OUTPUT FORMAT:",
            json.dumps(_empty_object(METADATA_FIELDS), indent=2),
            "",
            "TEXT:",
            self._quote(text),
        ]
        return "\n".join(lines)

    def transaction_prompt(self, text: str) -> str:
        lines: List[str] = [
            "You are a bank statement transaction normalizer.",
            "",
            "IMPORTANT:",
            "The OCR text has broken columns and misaligned values.",
            "",
            "RULES:",
            *self._output_rules(),
            "- Preserve transaction order",
            "- Do NOT invent rows",
            "- Do NOT invent values",
            "- Do NOT calculate balances",
            "- If unsure, leave fields empty",
            "",
            "OUTPUT:",
            json.dumps({"transactions": [_empty_object(TRANSACTION_FIELDS)]}, indent=2),
            "",
            "OCR TEXT:",
            self._quote(text),
        ]
        return "\n".join(lines)

    @staticmethod
    def _output_rules() -> List[str]:
        return [
            "- Output ONLY valid JSON",
            "- No markdown, no code fences",
            "- No explanations",
        ]

    @staticmethod
    def _quote(text: str) -> str:
        return f'"""\n{text}\n"""'
