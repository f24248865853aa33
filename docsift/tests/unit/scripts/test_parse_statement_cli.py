from __future__ import annotations

import json

import pytest

from docsift.application.commands.parse_statement import ParseStatementHandler
from docsift.domain.entities.page import Page, PageText
from docsift.domain.exceptions import OCRProcessingError
from docsift.scripts import parse_statement


class _Segmenter:
    def split(self, payload):
        return [Page(page_number=1, payload=payload)]


class _Ocr:
    def __init__(self, error=None):
        self.error = error

    def extract_text(self, page):
        if self.error is not None:
            raise self.error
        return PageText(page_number=page.page_number, text="Account No: 12345678")


class _Extraction:
    def complete(self, prompt, *, label):
        if label.startswith("Metadata"):
            return '{"bankName": "Alpha"}'
        return '{"transactions": [{"date": "01-Sep", "description": "SALARY"}]}'


@pytest.fixture
def statement_pdf(tmp_path):
    path = tmp_path / "statement.pdf"
    path.write_bytes(b"%PDF-1.4 statement")
    return path


def _use_handler(monkeypatch, handler):
    monkeypatch.setattr(parse_statement, "get_parse_statement_handler", lambda: handler)


def test_cli_writes_result_to_output_file(monkeypatch, statement_pdf, tmp_path):
    _use_handler(monkeypatch, ParseStatementHandler(_Segmenter(), _Ocr(), _Extraction()))
    output = tmp_path / "result.json"

    exit_code = parse_statement.main([str(statement_pdf), "--output", str(output), "--plain-logs"])

    assert exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["fileName"] == "statement.pdf"
    assert payload["accounts"][0]["accountNumber"] == "12345678"
    assert payload["accounts"][0]["transactions"][0]["description"] == "SALARY"


def test_cli_reports_pipeline_errors_on_stderr(monkeypatch, statement_pdf, capsys):
    error = OCRProcessingError(1, "File failed validation")
    _use_handler(monkeypatch, ParseStatementHandler(_Segmenter(), _Ocr(error=error), _Extraction()))

    exit_code = parse_statement.main([str(statement_pdf), "--plain-logs"])

    assert exit_code == 2
    last_line = capsys.readouterr().err.strip().splitlines()[-1]
    assert json.loads(last_line)["errorCode"] == "OCR_UNREADABLE"


def test_cli_rejects_missing_file(tmp_path, capsys):
    assert parse_statement.main([str(tmp_path / "absent.pdf"), "--plain-logs"]) == 1
    assert "File not found" in capsys.readouterr().err
