"""
API Schemas
"""
from .statement_schemas import (
    AccountSchema,
    ErrorResponseSchema,
    PageOutcomeSchema,
    ParseStatementResponseSchema,
    TransactionSchema,
    result_to_schema,
)

__all__ = [
    "AccountSchema",
    "ErrorResponseSchema",
    "PageOutcomeSchema",
    "ParseStatementResponseSchema",
    "TransactionSchema",
    "result_to_schema",
]
