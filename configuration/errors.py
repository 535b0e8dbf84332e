"""Configuration read errors and structured error payload helpers."""
from __future__ import annotations

from typing import Any, Dict, Optional


class BooleanConfigError(TypeError):
    """Raised when a boolean variable holds valid JSON that is not true/false."""

    def __init__(self, key: str, raw: str):
        self.key = key
        self.raw = raw
        super().__init__(f"{key} must be a JSON boolean (true/false), got {raw!r}")


def error_payload(
    code: str,
    message: str,
    *,
    key: str,
    hint: Optional[str] = None,
    extra: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Return a consistent error body for a misconfigured key."""
    payload: Dict[str, Any] = {"code": code, "message": message, "key": key}
    if hint:
        payload["hint"] = hint
    if extra:
        payload.update(extra)
    return payload
