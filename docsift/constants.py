from __future__ import annotations

# Single source of truth for static constants and versions.

# Section headers that open the transaction table, searched in this order.
TRANSACTION_SECTION_HEADERS = (
    "Statement of Transactions",
    "Transaction Details",
    "Transaction History",
    "Account Activity",
    "Transactions",
    "Date Description",
    "Date Particulars",
    "Value Date",
)

# Account-number patterns applied to raw OCR text, highest priority first.
ACCOUNT_NUMBER_PATTERNS = (
    r"(?:account\s*(?:no|number|#)|a/c\s*(?:no|number|#))\.?\s*[:\-]?\s*(\d{8,18})",
    r"(?:savings|current|checking)\s*a/c\s*[:\-]?\s*(\d{8,18})",
    r"account\s*[:\-]\s*(\d{8,18})",
    r"\b(\d{10,18})\b",
)

METADATA_FIELDS = (
    "bankName",
    "accountHolderName",
    "accountNumber",
    "accountType",
    "currency",
    "statementStartDate",
    "statementEndDate",
)

TRANSACTION_FIELDS = (
    "date",
    "description",
    "debitAmount",
    "creditAmount",
    "runningBalance",
)

SYNTHETIC_ACCOUNT_PREFIX = "UNKNOWN"
SYNTHETIC_BANK_PLACEHOLDER = "BANK"

# Upper bound on repaired-JSON text echoed into errors and logs.
DIAGNOSTIC_EXCERPT_CHARS = 200

PDF_SIGNATURE = b"%PDF-"
