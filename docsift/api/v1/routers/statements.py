"""Bank statement parsing endpoint for v1 API."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Tuple

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import JSONResponse

from docsift.api.schemas import ErrorResponseSchema, ParseStatementResponseSchema, result_to_schema
from docsift.api.v1.dependencies import get_app_settings, get_parse_statement_handler
from docsift.application.commands.parse_statement import (
    ParseStatementCommand,
    ParseStatementHandler,
)
from docsift.config import Settings
from docsift.domain.exceptions import DocSiftError, InvalidUploadError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["statements"])


@router.post(
    "/parse-bank-statement",
    response_model=ParseStatementResponseSchema,
    responses={
        400: {"model": ErrorResponseSchema},
        413: {"model": ErrorResponseSchema},
        422: {"model": ErrorResponseSchema},
        502: {"model": ErrorResponseSchema},
        503: {"model": ErrorResponseSchema},
        504: {"model": ErrorResponseSchema},
    },
)
def parse_bank_statement(
    file: Optional[UploadFile] = File(None),
    handler: ParseStatementHandler = Depends(get_parse_statement_handler),
    settings: Settings = Depends(get_app_settings),
):
    # Declared sync so FastAPI runs the blocking pipeline in its threadpool.
    try:
        payload, filename = _read_upload(file, settings.max_upload_bytes)
        result = handler.handle(ParseStatementCommand(payload=payload, file_name=filename))
    except DocSiftError as exc:
        logger.error("Statement parsing failed: %s", exc.message,
                     extra={"page": exc.page_number, "stage": exc.stage, "error_code": exc.error_code.value})
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
    return result_to_schema(result)


def _read_upload(file: Optional[UploadFile], max_bytes: int) -> Tuple[bytes, str]:
    if file is None:
        raise InvalidUploadError("File missing")
    if not file.filename:
        raise InvalidUploadError("Filename is required")
    if Path(file.filename).suffix.lower() != ".pdf":
        raise InvalidUploadError("Please select a PDF file only. Other file types are not supported.")

    data = file.file.read(max_bytes + 1)
    if len(data) > max_bytes:
        limit_mb = max_bytes // (1024 * 1024)
        raise InvalidUploadError(f"File exceeds the maximum limit of {limit_mb}MB", too_large=True)
    if not data:
        raise InvalidUploadError("The uploaded file is empty")
    return data, file.filename
