#!/usr/bin/env python3
"""Run the statement pipeline on a local PDF and print the result JSON."""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv

from docsift.api.v1.dependencies import get_parse_statement_handler
from docsift.app_logging import configure_logging
from docsift.application.commands.parse_statement import ParseStatementCommand
from docsift.config import get_settings
from docsift.domain.exceptions import DocSiftError


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("pdf", type=Path, help="Path to the bank statement PDF")
    parser.add_argument("--output", "-o", type=Path, help="Write JSON here instead of stdout")
    parser.add_argument("--plain-logs", action="store_true", help="Human-readable logs instead of JSON lines")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    configure_logging(structured=not args.plain_logs, stream=sys.stderr)

    if not args.pdf.is_file():
        print(f"File not found: {args.pdf}", file=sys.stderr)
        return 1

    try:
        get_settings().require_service_configuration()
        handler = get_parse_statement_handler()
        result = handler.handle(ParseStatementCommand(payload=args.pdf.read_bytes(), file_name=args.pdf.name))
    except DocSiftError as exc:
        print(json.dumps(exc.to_dict(), ensure_ascii=False), file=sys.stderr)
        return 2

    rendered = json.dumps(result.to_dict(), indent=2, ensure_ascii=False)
    if args.output:
        args.output.write_text(rendered + "\n", encoding="utf-8")
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
