# File: logging.py
# Directory: core
# Purpose: Structured JSON log lines for configuration events. Payloads are
#          always made serializable and every line carries a UTC timestamp.
#
# Upstream:
#   - Imports: datetime, json
#   - Callers: configuration.audit, tests.*
#
# Downstream:
#   - stdout (container logs / log aggregation)
#
# Contents:
#   - log_event(event_type: str, payload: dict)

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict


def _safe(obj: Any) -> Any:
    """
    Return obj if json can encode it, otherwise a {"_repr": ...} stand-in.
    """
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError, RecursionError):
        try:
            return {"_repr": repr(obj)}
        except Exception:
            return {"_repr": "<unserializable>"}


def _timestamp() -> str:
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"


def log_event(event_type: str, payload: Dict[str, Any]) -> None:
    """
    Print one JSON log line.
    Example:
      {"timestamp":"2026-10-19T08:00:00.000000Z","event":"config_audit","details":{...}}
    """
    ts = _timestamp()
    record = {
        "timestamp": ts,
        "event": event_type,
        "details": _safe(payload),
    }
    try:
        print(json.dumps(record, ensure_ascii=False))
    except Exception:
        # Last resort: event_type itself may not encode
        print(f'{{"timestamp":"{ts}","event":{json.dumps(str(event_type))},"details":"<logging failure>"}}')
