"""
Schemas for the bank statement parsing endpoint
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from docsift.domain.entities.pipeline_result import PipelineResult


class TransactionSchema(BaseModel):
    date: str = ""
    description: str = ""
    debitAmount: str = ""
    creditAmount: str = ""
    runningBalance: str = ""


class AccountSchema(BaseModel):
    accountNumber: str
    bankName: str = ""
    accountHolderName: str = ""
    accountType: str = ""
    currency: str = ""
    statementStartDate: str = ""
    statementEndDate: str = ""
    transactions: List[TransactionSchema] = Field(default_factory=list)


class PageOutcomeSchema(BaseModel):
    pageNumber: int
    state: str
    accountNumber: Optional[str] = None
    identifierSource: Optional[str] = None
    transactionCount: int = 0


class ParseStatementResponseSchema(BaseModel):
    success: bool = True
    fileName: str
    accounts: List[AccountSchema] = Field(default_factory=list)
    pages: List[PageOutcomeSchema] = Field(default_factory=list)


class ErrorResponseSchema(BaseModel):
    errorCode: str
    message: str
    pageNumber: Optional[int] = None
    stage: Optional[str] = None


def result_to_schema(result: PipelineResult) -> ParseStatementResponseSchema:
    return ParseStatementResponseSchema.model_validate(result.to_dict())
