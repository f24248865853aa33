from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

# LogRecord attributes that are never copied into the JSON payload.
_RESERVED_ATTRS = frozenset(
  vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime"}

_NOISY_LOGGERS = {
  "urllib3": logging.WARNING,
  "uvicorn.access": logging.WARNING,
  "httpx": logging.WARNING,
  "openai": logging.INFO,
  "azure": logging.WARNING,
}


class JsonFormatter(logging.Formatter):
  def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
    payload: dict[str, Any] = {
      "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
    }
    if record.exc_info:
      payload["exc_info"] = self.formatException(record.exc_info)
    # Structured extras such as ``page`` and ``stage`` passed via ``extra=``.
    for key, value in record.__dict__.items():
      if key in _RESERVED_ATTRS or key.startswith("_") or key in payload:
        continue
      if isinstance(value, (str, int, float, bool)) or value is None:
        payload[key] = value
    return json.dumps(payload, ensure_ascii=False)


def _log_level() -> str:
  return os.getenv("LOG_LEVEL", "INFO").upper()


def configure_logging(structured: bool = True, stream: TextIO | None = None) -> None:
  root = logging.getLogger()
  for handler in list(root.handlers):  # reset existing handlers
    root.removeHandler(handler)

  root.setLevel(_log_level())
  stream_handler = logging.StreamHandler(stream or sys.stdout)
  if structured:
    stream_handler.setFormatter(JsonFormatter())
  else:
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
  root.addHandler(stream_handler)

  for name, level in _NOISY_LOGGERS.items():
    logging.getLogger(name).setLevel(level)
