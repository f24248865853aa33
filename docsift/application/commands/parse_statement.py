"""ParseStatement Command - runs the multi-page extraction pipeline.

Pages are processed strictly in order: the identity of a page without its
own account number depends on the page before it. The first failure aborts
the run and is re-raised annotated with its page number and stage.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple

from docsift.domain.entities.account import AccountMetadata, TransactionRow
from docsift.domain.entities.page import Page, PageText
from docsift.domain.entities.pipeline_result import PageOutcome, PipelineResult
from docsift.domain.exceptions import DocSiftError
from docsift.domain.services.account_resolver import AccountIdentityResolver
from docsift.domain.services.transaction_aggregator import LedgerState, TransactionAggregator
from docsift.domain.services.transaction_window import extract_transaction_block
from docsift.domain.value_objects.page_state import PageState, can_transition
from docsift.infrastructure.llm.json_recovery import recover_json_object
from docsift.infrastructure.llm.prompt_builder import StatementPromptBuilder

logger = logging.getLogger(__name__)

STAGE_OCR = "ocr"
STAGE_METADATA = "metadata"
STAGE_TRANSACTIONS = "transactions"


class PageSegmenter(Protocol):
    def split(self, payload: bytes) -> List[Page]: ...

class OcrClient(Protocol):
    def extract_text(self, page: Page) -> PageText: ...

class ExtractionClient(Protocol):
    def complete(self, prompt: str, *, label: str) -> str: ...


@dataclass(frozen=True)
class ParseStatementCommand:
    payload: bytes
    file_name: str


class ParseStatementHandler:
    """Handles ParseStatement commands."""

    def __init__(
        self,
        segmenter: PageSegmenter,
        ocr_client: OcrClient,
        extraction_client: ExtractionClient,
        *,
        prompt_builder: Optional[StatementPromptBuilder] = None,
        resolver: Optional[AccountIdentityResolver] = None,
        aggregator: Optional[TransactionAggregator] = None,
    ):
        self._segmenter = segmenter
        self._ocr = ocr_client
        self._extraction = extraction_client
        self._prompts = prompt_builder or StatementPromptBuilder()
        self._resolver = resolver or AccountIdentityResolver()
        self._aggregator = aggregator or TransactionAggregator()

    def handle(self, command: ParseStatementCommand) -> PipelineResult:
        pages = self._segmenter.split(command.payload)
        logger.info("Parsing %s (%s pages)", command.file_name, len(pages))

        state = LedgerState()
        outcomes: List[PageOutcome] = []
        for page in pages:
            state, outcome = self.process_page(state, page)
            outcomes.append(outcome)

        result = PipelineResult(
            file_name=command.file_name,
            accounts=state.ordered_accounts(),
            pages=tuple(outcomes),
        )
        logger.info(
            "Parsed %s: %s accounts, %s skipped pages",
            command.file_name,
            len(result.accounts),
            len(result.skipped_pages),
        )
        return result

    def process_page(self, state: LedgerState, page: Page) -> Tuple[LedgerState, PageOutcome]:
        """Run one page through OCR, extraction, resolution and aggregation."""

        number = page.page_number
        current = PageState.SEGMENTED
        page_text = self._run_stage(STAGE_OCR, number, self._ocr.extract_text, page)
        current = self._advance(number, current, PageState.OCR_DONE)

        if page_text.is_empty:
            self._advance(number, current, PageState.SKIPPED)
            return state, PageOutcome(page_number=number, state=PageState.SKIPPED)

        metadata = self._extract_metadata(number, page_text.text)
        current = self._advance(number, current, PageState.METADATA_EXTRACTED)

        transactions = self._extract_transactions(number, page_text.text)
        current = self._advance(number, current, PageState.TRANSACTIONS_EXTRACTED)

        identifier = self._resolver.resolve(metadata, page_text.text, state.previous_identifier)
        current = self._advance(
            number, current, PageState.RESOLVED, account=identifier.value, source=identifier.source.value
        )

        state = self._aggregator.apply(state, identifier, metadata, transactions)
        current = self._advance(number, current, PageState.AGGREGATED, transactions=len(transactions))

        return state, PageOutcome(
            page_number=number,
            state=current,
            account_number=identifier.value,
            identifier_source=identifier.source,
            transaction_count=len(transactions),
        )

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------
    def _extract_metadata(self, page_number: int, text: str) -> AccountMetadata:
        label = f"Metadata page {page_number}"
        payload = self._run_stage(
            STAGE_METADATA, page_number, self._complete_json, self._prompts.metadata_prompt(text), label
        )
        return AccountMetadata.from_payload(payload)

    def _extract_transactions(self, page_number: int, text: str) -> Tuple[TransactionRow, ...]:
        label = f"Transactions page {page_number}"
        window = extract_transaction_block(text)
        payload = self._run_stage(
            STAGE_TRANSACTIONS, page_number, self._complete_json, self._prompts.transaction_prompt(window), label
        )
        return TransactionRow.list_from_payload(payload)

    def _complete_json(self, prompt: str, label: str) -> dict:
        raw = self._extraction.complete(prompt, label=label)
        return recover_json_object(raw, label)

    @staticmethod
    def _run_stage(stage: str, page_number: int, func, *args):
        try:
            return func(*args)
        except DocSiftError as exc:
            exc.with_context(page_number=page_number, stage=stage)
            logger.error("Page %s failed during %s: %s", page_number, stage, exc.message,
                         extra={"page": page_number, "stage": stage})
            raise

    @staticmethod
    def _advance(page_number: int, current: PageState, state: PageState, **details) -> PageState:
        """Move a page to ``state``, refusing backward or post-terminal moves."""
        if not can_transition(current, state):
            raise DocSiftError(
                f"Page {page_number} cannot move from {current.value} to {state.value}",
                page_number=page_number,
                stage=state.value,
            )
        level = logging.INFO if state.is_terminal else logging.DEBUG
        suffix = f" {details}" if details else ""
        logger.log(level, "Page %s -> %s%s", page_number, state.value, suffix,
                   extra={"page": page_number, "stage": state.value})
        return state
