from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RESERVED_ATTRS = frozenset(
  vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None)).keys()
) | {"message", "asctime", "taskName"}


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
    for key, value in getattr(record, "__dict__", {}).items():
      if key.startswith("_") or key in _RESERVED_ATTRS:
        continue
      if key in payload:
        continue
      if isinstance(value, (str, int, float, bool)) or value is None:
        payload[key] = value
    return json.dumps(payload, ensure_ascii=False)


def _log_level() -> str:
  return os.getenv("LOG_LEVEL", "INFO").upper()


def _structured_default() -> bool:
  return os.getenv("LOG_FORMAT", "json").strip().lower() != "plain"


def configure_logging(structured: bool | None = None) -> None:
  if structured is None:
    structured = _structured_default()

  root = logging.getLogger()
  for handler in list(root.handlers):  # reset existing handlers
    root.removeHandler(handler)

  root.setLevel(_log_level())
  stream_handler = logging.StreamHandler(sys.stdout)
  if structured:
    stream_handler.setFormatter(JsonFormatter())
  else:
    stream_handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
  root.addHandler(stream_handler)

  # Per-request connection chatter from the HTTP stack is rarely useful.
  logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
  logging.getLogger("urllib3").setLevel(logging.WARNING)
